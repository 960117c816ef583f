"""Search commands: find and grep."""

import re

from terminal.commands.base import CommandContext, CommandRegistry
from terminal.paths import CURRENT, join_path
from terminal.result import CommandResult

GLOB_TRANSLATIONS = {"*": ".*", "?": "."}


def glob_to_regex(pattern: str) -> re.Pattern:
    """Compile a `find -name` glob into an anchored regular expression.

    `*` matches any run of characters and `?` any single character; every
    other character, `.` included, matches itself.

    Args:
        pattern: The glob as typed (surrounding quotes already removed).

    Returns:
        Compiled regex matching whole names.
    """
    body = "".join(GLOB_TRANSLATIONS.get(char, re.escape(char)) for char in pattern)
    return re.compile(f"^{body}$")


def find(ctx: CommandContext) -> CommandResult:
    """Match direct children of a directory against a `-name` glob.

    Usage: find [path] -name <pattern>. The search is not recursive. Matches
    are printed path-qualified, one per line.
    """
    path_token = CURRENT
    pattern = None

    args = ctx.args
    i = 0
    while i < len(args):
        if args[i] == "-name" and i + 1 < len(args):
            pattern = args[i + 1]
            i += 2
            continue
        if i == 0 and not args[i].startswith("-"):
            path_token = args[i]
        i += 1

    if pattern is None:
        return CommandResult.text("find: missing arguments")

    # quotes survive tokenization when they are nested inside the other kind
    pattern = re.sub(r"^['\"]|['\"]$", "", pattern)
    regex = glob_to_regex(pattern)

    search_path = ctx.cwd if path_token == CURRENT else ctx.resolve(path_token)
    listing = ctx.filesystem.list_children(search_path)

    matches = [
        join_path(search_path, name)
        for name in listing.folders + listing.files
        if regex.match(name)
    ]
    return CommandResult.lines(matches)


def grep(ctx: CommandContext) -> CommandResult:
    """Print lines containing a literal substring, with file name and line number.

    Usage: grep <pattern> <file...>. Missing files produce an error line in
    place, between the matches of the other files.
    """
    if len(ctx.args) < 2:
        return CommandResult.text("grep: missing pattern")

    pattern = ctx.args[0]
    results = []

    for name in ctx.args[1:]:
        path = ctx.resolve(name)
        if not ctx.filesystem.file_exists(path):
            results.append(f"grep: {name}: No such file or directory")
            continue

        for number, line in enumerate(ctx.filesystem.read_file(path).split("\n"), start=1):
            if pattern in line:
                results.append(f"{name}:{number}: {line}")

    return CommandResult.lines(results)


def register_commands(registry: CommandRegistry) -> None:
    """Register the search commands."""
    registry.register("find", find, "Search for files")
    registry.register("grep", grep, "Search for a pattern in files")
