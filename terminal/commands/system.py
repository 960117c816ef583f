"""System commands: echo, ps, whoami, date, help, man, history, clear."""

from terminal.commands.base import CommandContext, CommandRegistry
from terminal.commands.docs import HELP_LISTED, HELP_TEXT, MAN_PAGES
from terminal.result import CommandResult

PROCESS_TABLE = [
    "  PID TTY          TIME CMD",
    " 1234 pts/0    00:00:01 bash",
    " 5678 pts/0    00:00:00 npm",
    " 9012 pts/0    00:00:12 node",
    "13456 pts/0    00:00:00 ps",
]


def echo(ctx: CommandContext) -> CommandResult:
    return CommandResult.text(" ".join(ctx.args))


def ps(ctx: CommandContext) -> CommandResult:
    return CommandResult.lines(PROCESS_TABLE)


def whoami(ctx: CommandContext) -> CommandResult:
    return CommandResult.text(ctx.environment.username)


def date(ctx: CommandContext) -> CommandResult:
    """Print the session clock in the classic `date` layout."""
    now = ctx.environment.now()
    zone = now.strftime("%Z") or "UTC"
    return CommandResult.text(f"{now:%a %b %d %H:%M:%S} {zone} {now:%Y}")


def help_(ctx: CommandContext) -> CommandResult:
    """Show the command overview, or the summary of one registered command.

    Commands registered beyond the built-in set are appended to the overview.
    """
    if ctx.args:
        topic = ctx.args[0]
        summary = ctx.commands.get(topic.lower())
        if summary is None:
            return CommandResult.text(f"help: no help topics match '{topic}'")
        return CommandResult.text(f"{topic.lower()}: {summary or 'No description available'}")

    extra = [name for name in ctx.commands if name not in HELP_LISTED]
    if not extra:
        return CommandResult.text(HELP_TEXT)
    lines = [f"  {name:<23}{ctx.commands[name]}".rstrip() for name in extra]
    return CommandResult.text(HELP_TEXT + "\n\nOther Commands:\n" + "\n".join(lines))


def man(ctx: CommandContext) -> CommandResult:
    if not ctx.args:
        return CommandResult.text("What manual page do you want?")

    page = ctx.args[0]
    return CommandResult.text(MAN_PAGES.get(page, f"No manual entry for {page}"))


def history(ctx: CommandContext) -> CommandResult:
    """Number the session's command lines, oldest first."""
    return CommandResult.lines(
        [f"{number:>5}  {line}" for number, line in enumerate(ctx.history, start=1)]
    )


def clear(ctx: CommandContext) -> CommandResult:
    return CommandResult.clear()


def register_commands(registry: CommandRegistry) -> None:
    """Register the system commands."""
    registry.register("echo", echo, "Display a line of text")
    registry.register("ps", ps, "Report process status")
    registry.register("whoami", whoami, "Print current user")
    registry.register("date", date, "Show the current date and time")
    registry.register("help", help_, "Show available commands")
    registry.register("man", man, "Display manual page")
    registry.register("history", history, "Show command history")
    registry.register("clear", clear, "Clear the terminal screen")
