"""Virtual tree store.

The store is a flat representation of a directory tree: an ordered list of
directory paths and a mapping from file path to text content. All paths are
canonical (see terminal.paths). Every mutating operation is total: it either
applies completely or returns False without touching the tree.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from terminal.exceptions import FileNotFoundInTreeError, NotADirectoryInTreeError
from terminal.paths import base_name, is_descendant, is_direct_child, parent_path


def _is_canonical(path: str) -> bool:
    # no leading, trailing or repeated slashes
    return all(path.split("/"))


class FileEntry(BaseModel):
    """A single entry as seen by the file browser.

    Args:
        name: Last path segment.
        type: "folder" for directories, "file" for files.
        path: Canonical path of the entry.
    """

    name: str
    type: Literal["file", "folder"]
    path: str


class DirectoryListing(BaseModel):
    """Direct children of a directory, split by kind.

    Args:
        folders: Names of child directories (store order).
        files: Names of child files (store order).
    """

    folders: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether the directory has no children at all."""
        return not self.folders and not self.files


class VirtualFileSystem(BaseModel):
    """In-memory directory tree with file contents.

    Invariants:
    - The root directory (empty path) always exists and cannot be removed.
    - A path is never both a directory and a file.
    - Every file's parent directory exists.

    Args:
        directories: Directory paths in creation order. Always contains "".
        files: Mapping from file path to text content, in creation order.
    """

    directories: list[str] = Field(
        default_factory=lambda: [""], description="Directory paths in creation order"
    )
    files: dict[str, str] = Field(
        default_factory=dict, description="File contents keyed by canonical path"
    )

    @field_validator("directories")
    @classmethod
    def ensure_root(cls, v: list[str]) -> list[str]:
        """Make sure the root directory is always present, exactly once.

        Args:
            v: The directories value.

        Returns:
            The directory list with root first and duplicates dropped.
        """
        seen: dict[str, None] = {"": None}
        for path in v:
            seen.setdefault(path, None)
        return list(seen)

    @model_validator(mode="after")
    def check_invariants(self) -> "VirtualFileSystem":
        """Reject trees that violate the store invariants.

        Raises:
            ValueError: If any invariant is violated.
        """
        issues = self.validate_state()
        if issues:
            raise ValueError("; ".join(issues))
        return self

    # ===== Queries =====

    def directory_exists(self, path: str) -> bool:
        """Check whether a directory exists at exactly this path."""
        return path in self.directories

    def file_exists(self, path: str) -> bool:
        """Check whether a file exists at exactly this path."""
        return path in self.files

    def exists(self, path: str) -> bool:
        """Check whether anything exists at this path."""
        return self.file_exists(path) or self.directory_exists(path)

    def read_file(self, path: str) -> str:
        """Return the content of a file.

        Args:
            path: Canonical file path.

        Returns:
            The stored text.

        Raises:
            FileNotFoundInTreeError: If no file exists at the path.
        """
        if path not in self.files:
            raise FileNotFoundInTreeError(path)
        return self.files[path]

    def list_children(self, path: str) -> DirectoryListing:
        """List the direct children of a directory.

        A path that is not a directory simply has no children.

        Args:
            path: Canonical directory path ("" for root).

        Returns:
            DirectoryListing with folder and file names in store order.
        """
        return DirectoryListing(
            folders=[
                base_name(directory)
                for directory in self.directories
                if is_direct_child(directory, path)
            ],
            files=[base_name(file) for file in self.files if is_direct_child(file, path)],
        )

    def list_entries(self, path: str) -> list[FileEntry]:
        """List the direct children of a directory as browser entries.

        Folders come first, then files.

        Args:
            path: Canonical directory path ("" for root).

        Returns:
            List of FileEntry objects.

        Raises:
            NotADirectoryInTreeError: If the directory does not exist.
        """
        if not self.directory_exists(path):
            raise NotADirectoryInTreeError(path)
        folders = [
            FileEntry(name=base_name(directory), type="folder", path=directory)
            for directory in self.directories
            if is_direct_child(directory, path)
        ]
        files = [
            FileEntry(name=base_name(file), type="file", path=file)
            for file in self.files
            if is_direct_child(file, path)
        ]
        return folders + files

    def descendant_directories(self, path: str) -> list[str]:
        """Return every directory strictly below `path`, shallowest first."""
        nested = [directory for directory in self.directories if is_descendant(directory, path)]
        return sorted(nested, key=lambda directory: directory.count("/"))

    def descendant_files(self, path: str) -> list[str]:
        """Return every file strictly below `path`."""
        return [file for file in self.files if is_descendant(file, path)]

    # ===== Mutations =====

    def create_directory(self, path: str) -> bool:
        """Create a single directory.

        Parents are not created or checked; callers that need them (mkdir -p,
        recursive copies) create them first.

        Args:
            path: Canonical directory path.

        Returns:
            True if the directory was created, False if the path is taken.
        """
        if self.directory_exists(path) or self.file_exists(path):
            return False
        self.directories.append(path)
        return True

    def create_file(self, path: str, content: str = "") -> bool:
        """Create a file that does not exist yet.

        Args:
            path: Canonical file path.
            content: Initial file content.

        Returns:
            True if created. False if a file or directory already occupies the
            path or the parent directory is missing.
        """
        if self.file_exists(path):
            return False
        return self.write_file(path, content)

    def write_file(self, path: str, content: str) -> bool:
        """Create or overwrite a file.

        Args:
            path: Canonical file path.
            content: New file content.

        Returns:
            True if written. False if the path is a directory or the parent
            directory is missing.
        """
        if path == "" or path.endswith("/") or self.directory_exists(path):
            return False
        if not self.directory_exists(parent_path(path)):
            return False
        self.files[path] = content
        return True

    def remove_file(self, path: str) -> bool:
        """Remove a file.

        Returns:
            True if removed, False if no such file.
        """
        if not self.file_exists(path):
            return False
        del self.files[path]
        return True

    def remove_directory(self, path: str, recursive: bool = False) -> bool:
        """Remove a directory, optionally with everything below it.

        Args:
            path: Canonical directory path.
            recursive: Remove all descendant files and directories too.

        Returns:
            True if removed. False for the root, a missing directory, or a
            non-empty directory when `recursive` is False.
        """
        if path == "" or not self.directory_exists(path):
            return False

        nested_files = self.descendant_files(path)
        nested_dirs = self.descendant_directories(path)
        if (nested_files or nested_dirs) and not recursive:
            return False

        for file in nested_files:
            del self.files[file]
        doomed = set(nested_dirs)
        doomed.add(path)
        self.directories = [d for d in self.directories if d not in doomed]
        return True

    # ===== Introspection =====

    def validate_state(self) -> list[str]:
        """Check the store invariants.

        Returns:
            List of validation error messages (empty list if valid).
        """
        issues = []
        directory_set = set(self.directories)

        if "" not in directory_set:
            issues.append("Root directory is missing")
        if len(directory_set) != len(self.directories):
            issues.append("Duplicate directory entries")

        for path in self.files:
            if path in directory_set:
                issues.append(f"Path '{path}' is both a file and a directory")
            parent = parent_path(path)
            if parent and parent not in directory_set:
                issues.append(f"File '{path}' has no parent directory '{parent}'")

        for path in self.directories:
            if path and not _is_canonical(path):
                issues.append(f"Directory '{path}' is not canonical")
        for path in self.files:
            if not _is_canonical(path):
                issues.append(f"File '{path}' is not canonical")

        return issues

    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serialisable copy of the tree."""
        return {
            "directories": list(self.directories),
            "files": dict(self.files),
            "directory_count": len(self.directories),
            "file_count": len(self.files),
        }

    @property
    def summary(self) -> str:
        """Brief human-readable description of the tree size."""
        # root is not counted
        return f"{len(self.directories) - 1} directories, {len(self.files)} files"
