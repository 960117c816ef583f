"""Unit tests for ls, cd and pwd."""

import re

from terminal.commands.navigation import cd, ls, pwd
from tests.fixtures.terminal import create_context, create_environment

FILE_LINE = re.compile(r"^-rw-r--r-- 1 user group +\d{1,4} Mar 7, 02:05 PM (\S+)$")


class TestLs:
    """Test ls."""

    def test_lists_root(self, filesystem):
        result = ls(create_context("ls", filesystem=filesystem))

        assert result.output == "docs/  src/  notes.txt  todo.txt"

    def test_lists_working_directory(self, filesystem):
        result = ls(create_context("ls", cwd="docs", filesystem=filesystem))

        assert result.output == "guides/  intro.md"

    def test_lists_path_operand(self, filesystem):
        result = ls(create_context("ls", ["/docs/guides"], cwd="src", filesystem=filesystem))

        assert result.output == "setup.md"

    def test_dot_lists_working_directory(self, filesystem):
        result = ls(create_context("ls", ["."], cwd="docs", filesystem=filesystem))

        assert result.output == "guides/  intro.md"

    def test_empty_directory(self, empty_filesystem):
        assert ls(create_context("ls", filesystem=empty_filesystem)).output == ""

    def test_missing_directory_lists_as_empty(self, filesystem):
        assert ls(create_context("ls", ["nope"], filesystem=filesystem)).output == ""

    def test_long_format(self, filesystem):
        result = ls(create_context("ls", ["-l"], filesystem=filesystem))
        lines = result.output.split("\n")

        assert lines[0] == "drwxr-xr-x 1 user group   4096 Mar 7, 02:05 PM docs/"
        assert lines[1] == "drwxr-xr-x 1 user group   4096 Mar 7, 02:05 PM src/"
        assert [FILE_LINE.match(line).group(1) for line in lines[2:]] == [
            "notes.txt",
            "todo.txt",
        ]

    def test_long_format_sizes_follow_seed(self, filesystem):
        first = ls(create_context("ls", ["-l"], filesystem=filesystem,
                                  environment=create_environment(random_seed=7)))
        second = ls(create_context("ls", ["-l"], filesystem=filesystem,
                                   environment=create_environment(random_seed=7)))

        assert first.output == second.output

    def test_ls_does_not_change_directory(self, filesystem):
        assert ls(create_context("ls", filesystem=filesystem)).new_directory is None


class TestCd:
    """Test cd."""

    def test_into_child(self, filesystem):
        result = cd(create_context("cd", ["docs"], filesystem=filesystem))

        assert result.new_directory == "docs"
        assert result.output == ""

    def test_absolute(self, filesystem):
        result = cd(create_context("cd", ["/docs/guides"], cwd="src", filesystem=filesystem))

        assert result.new_directory == "docs/guides"

    def test_no_argument_goes_to_root(self, filesystem):
        result = cd(create_context("cd", cwd="docs/guides", filesystem=filesystem))

        assert result.new_directory == ""

    def test_parent(self, filesystem):
        result = cd(create_context("cd", [".."], cwd="docs/guides", filesystem=filesystem))

        assert result.new_directory == "docs"

    def test_parent_at_root(self, filesystem):
        assert cd(create_context("cd", [".."], filesystem=filesystem)).new_directory == ""

    def test_current(self, filesystem):
        result = cd(create_context("cd", ["."], cwd="docs", filesystem=filesystem))

        assert result.new_directory == "docs"

    def test_missing_directory_keeps_working_directory(self, filesystem):
        result = cd(create_context("cd", ["nope"], cwd="docs", filesystem=filesystem))

        assert result.output == "cd: nope: No such file or directory"
        assert result.new_directory == "docs"

    def test_file_is_not_a_directory(self, filesystem):
        result = cd(create_context("cd", ["notes.txt"], filesystem=filesystem))

        assert result.output == "cd: notes.txt: No such file or directory"
        assert result.new_directory == ""


class TestPwd:
    """Test pwd."""

    def test_root(self):
        assert pwd(create_context("pwd")).output == "/"

    def test_nested(self):
        assert pwd(create_context("pwd", cwd="docs/guides")).output == "/docs/guides"
