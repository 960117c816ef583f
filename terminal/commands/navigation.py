"""Navigation commands: ls, cd, pwd."""

from terminal.commands.base import CommandContext, CommandRegistry
from terminal.paths import CURRENT, PARENT, resolve_cd_target
from terminal.result import CommandResult

DIRECTORY_SIZE = 4096
MAX_FILE_SIZE = 9999


def ls(ctx: CommandContext) -> CommandResult:
    """List the direct children of the working directory or a given path.

    Folders are shown with a trailing slash. With `-l` each entry gets a
    synthetic permissions/size/date line; directory sizes are fixed and file
    sizes are drawn from the session's random source. A path that does not
    exist lists as empty.
    """
    operands = ctx.operands
    if operands and operands[0] != CURRENT:
        target = ctx.resolve(operands[0])
    else:
        target = ctx.cwd
    listing = ctx.filesystem.list_children(target)

    if not ctx.has_flag("-l"):
        names = [f"{name}/" for name in listing.folders] + listing.files
        return CommandResult.text("  ".join(names))

    now = ctx.environment.now()
    stamp = f"{now:%b} {now.day}, {now:%I:%M %p}"
    lines = []
    for name in listing.folders:
        lines.append(f"drwxr-xr-x 1 user group {DIRECTORY_SIZE:>6} {stamp} {name}/")
    for name in listing.files:
        size = ctx.environment.rng.randint(0, MAX_FILE_SIZE)
        lines.append(f"-rw-r--r-- 1 user group {size:>6} {stamp} {name}")
    return CommandResult.lines(lines)


def cd(ctx: CommandContext) -> CommandResult:
    """Change the working directory.

    Without an argument the session returns to the root.
    """
    if not ctx.args:
        return CommandResult(new_directory="")

    target = ctx.args[0]
    new_directory = resolve_cd_target(target, ctx.cwd)

    # `..` and `.` move within the current path without consulting the tree
    if target in (PARENT, CURRENT):
        return CommandResult(new_directory=new_directory)

    if not ctx.filesystem.directory_exists(new_directory):
        return CommandResult(
            output=f"cd: {target}: No such file or directory",
            new_directory=ctx.cwd,
        )
    return CommandResult(new_directory=new_directory)


def pwd(ctx: CommandContext) -> CommandResult:
    return CommandResult.text(f"/{ctx.cwd}")


def register_commands(registry: CommandRegistry) -> None:
    """Register the navigation commands."""
    registry.register("ls", ls, "List directory contents")
    registry.register("cd", cd, "Change directory")
    registry.register("pwd", pwd, "Print working directory")
