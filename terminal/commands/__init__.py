"""Command handlers and the registry that dispatches to them."""

from terminal.commands import file_ops, navigation, search, system, tools
from terminal.commands.base import CommandContext, CommandHandler, CommandRegistry

__all__ = [
    "CommandContext",
    "CommandHandler",
    "CommandRegistry",
    "build_default_registry",
]


def build_default_registry() -> CommandRegistry:
    """Create a registry with every built-in command registered.

    Returns:
        A new CommandRegistry; callers may register extra commands on it.
    """
    registry = CommandRegistry()
    for module in (navigation, file_ops, search, tools, system):
        module.register_commands(registry)
    return registry
