"""Path resolution for the virtual tree.

Canonical paths are slash-separated strings with no leading or trailing slash.
The empty string denotes the root directory.

Resolution is intentionally shallow: empty segments are dropped, so leading,
trailing and repeated slashes vanish, and a relative token is prefixed with the
working directory. `..` and `.` are honoured as whole `cd` arguments and
nowhere else, so `cat a/../b` looks up the literal path `a/../b`. All prefix
and child-matching logic for paths lives in this module.
"""

PARENT = ".."
CURRENT = "."


def resolve_path(token: str, working_dir: str) -> str:
    """Resolve a command argument against the working directory.

    Args:
        token: The path as typed by the user.
        working_dir: The current working directory (canonical).

    Returns:
        The canonical tree path for the token.
    """
    relative = "/".join(part for part in token.split("/") if part)
    if token.startswith("/") or not working_dir:
        return relative
    return join_path(working_dir, relative) if relative else working_dir


def resolve_cd_target(token: str, working_dir: str) -> str:
    """Resolve a `cd` argument, honouring `..` and `.` as whole tokens.

    Args:
        token: The `cd` argument.
        working_dir: The current working directory (canonical).

    Returns:
        The canonical path `cd` should move to. Existence is not checked.
    """
    if token == PARENT:
        return parent_path(working_dir)
    if token == CURRENT:
        return working_dir
    return resolve_path(token, working_dir)


def parent_path(path: str) -> str:
    """Return the parent of a canonical path (root for top-level entries)."""
    if "/" not in path:
        return ""
    return path[: path.rfind("/")]


def base_name(path: str) -> str:
    """Return the last segment of a canonical path."""
    return path[path.rfind("/") + 1 :]


def join_path(parent: str, name: str) -> str:
    """Join a directory path and a child name."""
    return f"{parent}/{name}" if parent else name


def is_descendant(path: str, ancestor: str) -> bool:
    """Check whether `path` lies strictly below `ancestor`.

    Every non-root path is a descendant of the root.
    """
    if ancestor == "":
        return path != ""
    return path.startswith(ancestor + "/")


def is_direct_child(path: str, parent: str) -> bool:
    """Check whether `path` is exactly one segment below `parent`."""
    if not is_descendant(path, parent):
        return False
    return "/" not in relative_to(path, parent)


def relative_to(path: str, ancestor: str) -> str:
    """Return `path` relative to `ancestor`.

    Args:
        path: A descendant of `ancestor`.
        ancestor: The directory to strip.

    Returns:
        The remaining segments without a leading slash.

    Raises:
        ValueError: If `path` is not below `ancestor`.
    """
    if not is_descendant(path, ancestor):
        raise ValueError(f"'{path}' is not inside '{ancestor}'")
    if ancestor == "":
        return path
    return path[len(ancestor) + 1 :]


def ancestors(path: str) -> list[str]:
    """Return every proper ancestor of `path`, shallowest first, root excluded.

    Example:
        ancestors("a/b/c") == ["a", "a/b"]
    """
    parts = [part for part in path.split("/") if part]
    return ["/".join(parts[:i]) for i in range(1, len(parts))]
