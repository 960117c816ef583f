"""File manipulation commands: cat, touch, mkdir, rm, cp, mv.

Commands that take several operands stop at the first failing operand and
report it; operands handled before the failure stay applied.
"""

from typing import Optional

from terminal.commands.base import CommandContext, CommandRegistry
from terminal.filesystem import VirtualFileSystem
from terminal.paths import ancestors, base_name, is_descendant, join_path, parent_path, relative_to
from terminal.result import CommandResult


def cat(ctx: CommandContext) -> CommandResult:
    """Print the content of each named file."""
    if not ctx.args:
        return CommandResult.text("cat: missing file operand")

    chunks = []
    for name in ctx.args:
        path = ctx.resolve(name)
        if ctx.filesystem.file_exists(path):
            chunks.append(ctx.filesystem.read_file(path))
        elif ctx.filesystem.directory_exists(path):
            chunks.append(f"cat: {name}: Is a directory")
        else:
            chunks.append(f"cat: {name}: No such file or directory")
    return CommandResult.lines(chunks)


def touch(ctx: CommandContext) -> CommandResult:
    """Create empty files; existing files and directories are left alone."""
    if not ctx.args:
        return CommandResult.text("touch: missing file operand")

    fs = ctx.filesystem
    for name in ctx.args:
        path = ctx.resolve(name)
        parent = parent_path(path)
        if parent and not fs.directory_exists(parent):
            return CommandResult.text(f"touch: cannot touch '{name}': No such file or directory")
        if not fs.exists(path):
            fs.create_file(path, "")
    return CommandResult()


def mkdir(ctx: CommandContext) -> CommandResult:
    """Create directories; `-p` creates missing ancestors and accepts existing ones."""
    create_parents = ctx.has_flag("-p")
    targets = ctx.operands
    if not targets:
        return CommandResult.text("mkdir: missing operand")

    fs = ctx.filesystem
    for name in targets:
        path = ctx.resolve(name)

        if fs.directory_exists(path):
            if not create_parents:
                return CommandResult.text(f"mkdir: cannot create directory '{name}': File exists")
            continue

        if fs.file_exists(path):
            return CommandResult.text(f"mkdir: cannot create directory '{name}': File exists")

        parent = parent_path(path)
        if not parent or fs.directory_exists(parent):
            fs.create_directory(path)
            continue

        if not create_parents:
            return CommandResult.text(
                f"mkdir: cannot create directory '{name}': No such file or directory"
            )

        chain = ancestors(path) + [path]
        if any(fs.file_exists(step) for step in chain):
            return CommandResult.text(f"mkdir: cannot create directory '{name}': Not a directory")
        for step in chain:
            fs.create_directory(step)

    return CommandResult()


def rm(ctx: CommandContext) -> CommandResult:
    """Remove files, and directories when `-r` is given.

    `-f` silences errors about missing operands.
    """
    recursive = ctx.has_flag("-r", "-R", "-rf", "-fr")
    force = ctx.has_flag("-f", "-rf", "-fr")
    targets = ctx.operands
    if not targets:
        return CommandResult.text("rm: missing operand")

    fs = ctx.filesystem
    for name in targets:
        path = ctx.resolve(name)
        if fs.file_exists(path):
            fs.remove_file(path)
        elif fs.directory_exists(path):
            if not recursive:
                return CommandResult.text(f"rm: cannot remove '{name}': Is a directory")
            if path == "":
                return CommandResult.text(f"rm: it is dangerous to operate recursively on '{name}'")
            fs.remove_directory(path, recursive=True)
        elif not force:
            return CommandResult.text(f"rm: cannot remove '{name}': No such file or directory")

    return CommandResult()


def _tree_conflict(fs: VirtualFileSystem, source: str, destination: str) -> Optional[str]:
    """Find the first destination path a subtree copy could not write.

    A directory of the copy may not land on an existing file, and a file may
    not land on an existing directory.

    Returns:
        The conflicting destination path, or None if the copy can proceed.
    """
    for directory in fs.descendant_directories(source):
        target = join_path(destination, relative_to(directory, source))
        if fs.file_exists(target):
            return target
    for file in fs.descendant_files(source):
        target = join_path(destination, relative_to(file, source))
        if fs.directory_exists(target):
            return target
    return None


def _copy_tree(fs: VirtualFileSystem, source: str, destination: str) -> bool:
    """Copy every directory and file below `source` to `destination`.

    Existing destination directories are merged into.

    Returns:
        True if every file was written.
    """
    fs.create_directory(destination)
    for directory in fs.descendant_directories(source):
        fs.create_directory(join_path(destination, relative_to(directory, source)))
    complete = True
    for file in fs.descendant_files(source):
        if not fs.write_file(join_path(destination, relative_to(file, source)), fs.files[file]):
            complete = False
    return complete


def _transfer(ctx: CommandContext, move: bool) -> CommandResult:
    """Shared implementation of cp and mv.

    The last operand is the destination. When it is an existing directory each
    source lands inside it under its own name; otherwise the single source is
    copied to that exact path. Directories need `-r` for cp; mv always moves
    the whole subtree. A move is a copy followed by deleting the source.

    Args:
        ctx: Command context.
        move: True for mv semantics.

    Returns:
        Empty output on success, or the first error line.
    """
    command = ctx.name
    operands = ctx.operands
    if not operands:
        return CommandResult.text(f"{command}: missing file operand")
    if len(operands) < 2:
        return CommandResult.text(
            f"{command}: missing destination file operand after '{operands[0]}'"
        )

    fs = ctx.filesystem
    recursive = move or ctx.has_flag("-r", "-R")
    dest_name = operands[-1]
    destination = ctx.resolve(dest_name)
    into_directory = fs.directory_exists(destination)

    sources = operands[:-1]
    if len(sources) > 1 and not into_directory:
        return CommandResult.text(f"{command}: target '{dest_name}' is not a directory")

    for name in sources:
        source = ctx.resolve(name)
        target = join_path(destination, base_name(source)) if into_directory else destination

        if fs.file_exists(source):
            if fs.directory_exists(target):
                return CommandResult.text(
                    f"{command}: cannot overwrite directory '{dest_name}' with non-directory"
                )
            if target == source:
                continue
            if not fs.write_file(target, fs.files[source]):
                return CommandResult.text(
                    f"{command}: cannot create regular file '{dest_name}': No such file or directory"
                )
            if move:
                fs.remove_file(source)

        elif fs.directory_exists(source):
            if not recursive:
                return CommandResult.text(
                    f"{command}: -r not specified; omitting directory '{name}'"
                )
            if target == source or is_descendant(target, source):
                if move:
                    return CommandResult.text(
                        f"mv: cannot move '{name}' to a subdirectory of itself, '{dest_name}'"
                    )
                return CommandResult.text(
                    f"cp: cannot copy a directory, '{name}', into itself, '{dest_name}'"
                )
            if fs.file_exists(target):
                return CommandResult.text(
                    f"{command}: cannot overwrite non-directory '{dest_name}' with directory '{name}'"
                )
            if not fs.directory_exists(parent_path(target)):
                return CommandResult.text(
                    f"{command}: cannot create directory '{dest_name}': No such file or directory"
                )
            conflict = _tree_conflict(fs, source, target)
            if conflict is not None:
                return CommandResult.text(
                    f"{command}: cannot overwrite non-directory '{conflict}' with directory"
                    if fs.file_exists(conflict)
                    else f"{command}: cannot overwrite directory '{conflict}' with non-directory"
                )
            if not _copy_tree(fs, source, target):
                return CommandResult.text(
                    f"{command}: cannot copy directory '{name}' to '{dest_name}'"
                )
            if move:
                fs.remove_directory(source, recursive=True)

        else:
            return CommandResult.text(
                f"{command}: cannot stat '{name}': No such file or directory"
            )

    return CommandResult()


def cp(ctx: CommandContext) -> CommandResult:
    return _transfer(ctx, move=False)


def mv(ctx: CommandContext) -> CommandResult:
    return _transfer(ctx, move=True)


def register_commands(registry: CommandRegistry) -> None:
    """Register the file manipulation commands."""
    registry.register("cat", cat, "Display file contents")
    registry.register("touch", touch, "Create an empty file")
    registry.register("mkdir", mkdir, "Create directory")
    registry.register("rm", rm, "Remove files or directories")
    registry.register("cp", cp, "Copy files or directories")
    registry.register("mv", mv, "Move/rename files or directories")
