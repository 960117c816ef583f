"""Unit tests for CommandRegistry and CommandContext."""

import pytest

from terminal.commands import CommandRegistry, build_default_registry
from terminal.result import CommandResult
from tests.fixtures.terminal import create_context

BUILTIN_COMMANDS = [
    "cat", "cd", "clear", "cp", "date", "echo", "find", "gh", "git", "grep",
    "help", "history", "ls", "man", "mkdir", "mv", "node", "npm", "ps", "pwd",
    "rm", "touch", "whoami",
]


class TestCommandRegistry:
    """Test registration and lookup."""

    def test_default_registry_has_every_builtin(self):
        registry = build_default_registry()

        assert registry.names == BUILTIN_COMMANDS
        assert len(registry) == len(BUILTIN_COMMANDS)

    def test_default_registries_are_independent(self):
        first = build_default_registry()
        second = build_default_registry()

        first.register("extra", lambda ctx: CommandResult())

        assert "extra" in first
        assert "extra" not in second

    def test_lookup_is_case_insensitive(self):
        registry = build_default_registry()

        assert registry.get("LS") is registry.get("ls")
        assert "PWD" in registry

    def test_unknown_name(self):
        assert build_default_registry().get("vim") is None

    def test_summary(self):
        registry = build_default_registry()

        assert registry.summary("ls") == "List directory contents"
        assert registry.summary("vim") == ""

    def test_duplicate_registration_fails(self):
        registry = CommandRegistry()
        registry.register("hello", lambda ctx: CommandResult())

        with pytest.raises(ValueError, match="already registered"):
            registry.register("HELLO", lambda ctx: CommandResult())

    def test_empty_name_fails(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            CommandRegistry().register("", lambda ctx: CommandResult())

    def test_decorator_registers_and_returns_handler(self):
        registry = CommandRegistry()

        @registry.command("hello", summary="Say hello")
        def hello(ctx):
            return CommandResult.text("hello")

        assert registry.get("hello") is hello
        assert registry.summary("hello") == "Say hello"


    def test_summaries_follow_names(self):
        registry = build_default_registry()

        summaries = registry.summaries()

        assert list(summaries) == registry.names
        assert summaries["mv"] == "Move/rename files or directories"


class TestCommandContext:
    """Test the helpers handlers use."""

    def test_resolve_uses_working_directory(self):
        ctx = create_context("cat", ["intro.md"], cwd="docs")

        assert ctx.resolve("intro.md") == "docs/intro.md"
        assert ctx.resolve("/notes.txt") == "notes.txt"

    def test_flags_and_operands(self):
        ctx = create_context("rm", ["-rf", "docs", "src"])

        assert ctx.has_flag("-r", "-rf")
        assert not ctx.has_flag("-f")
        assert ctx.operands == ["docs", "src"]

    def test_context_shares_the_tree(self, filesystem):
        ctx = create_context("touch", filesystem=filesystem)

        ctx.filesystem.create_file("shared.txt")

        assert filesystem.file_exists("shared.txt")
