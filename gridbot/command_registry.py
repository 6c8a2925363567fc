"""
Command registration system with decorator support.

Each command letter maps to one CommandBase subclass. Classes register
themselves through @register_command; the registry imports every module in
the gridbot.commands package on first lookup so the decorators run.
"""

from __future__ import annotations

import logging
import pkgutil
from collections.abc import Callable
from importlib import import_module

from gridbot.commands.base import CommandBase
from gridbot.config import TRACE

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Singleton registry for command classes.

    Lookups are case-insensitive: names are stored upper-cased.
    """

    _instance: CommandRegistry | None = None
    _commands: dict[str, type[CommandBase]] = {}
    _discovered: bool = False

    def __new__(cls) -> CommandRegistry:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the registry (only runs once due to singleton)."""
        if not hasattr(self, "_initialized"):
            self._commands = {}
            self._discovered = False
            self._initialized = True

    def register(self, name: str, command_class: type[CommandBase]) -> None:
        """
        Register a command class under a command letter.

        Raises:
            ValueError: If the letter is already registered to another class
        """
        key = name.upper()
        existing = self._commands.get(key)
        if existing is not None and existing is not command_class:
            raise ValueError(
                f"Command '{key}' is already registered with class {existing.__name__}. "
                f"Cannot register with {command_class.__name__}"
            )
        self._commands[key] = command_class
        logger.debug("Registered command '%s' -> %s", key, command_class.__name__)

    def get_command_class(self, name: str) -> type[CommandBase] | None:
        """Retrieve a command class by letter, or None if unknown."""
        if not self._discovered:
            self.discover_commands()
        if not isinstance(name, str):
            return None
        return self._commands.get(name.upper())

    def list_registered_commands(self) -> list[str]:
        """Return all registered command letters (sorted)."""
        if not self._discovered:
            self.discover_commands()
        return sorted(self._commands.keys())

    def discover_commands(self) -> None:
        """Import all modules in the gridbot.commands package to trigger decorators."""
        if self._discovered:
            return

        commands_package = import_module("gridbot.commands")
        for _, modname, ispkg in pkgutil.iter_modules(commands_package.__path__):
            if ispkg or modname == "base":
                continue
            module = import_module(f"gridbot.commands.{modname}")
            logger.log(TRACE, "Imported command module: gridbot.commands.%s", modname)
            # Re-register decorated classes of modules imported before a clear()
            for obj in vars(module).values():
                if (
                    isinstance(obj, type)
                    and issubclass(obj, CommandBase)
                    and vars(obj).get("_registered_name")
                ):
                    self.register(obj._registered_name, obj)

        self._discovered = True
        logger.debug("Command discovery complete. %d commands registered.", len(self._commands))

    def create_command(self, name: str) -> CommandBase | None:
        """
        Create a command instance for a single command character.

        Returns:
            The command, or None if the character is not a registered command
        """
        command_class = self.get_command_class(name)
        if command_class is None:
            logger.log(TRACE, "match_unknown name=%r", name)
            return None
        return command_class(name)

    def clear(self) -> None:
        """
        Clear all registered commands.

        This is mainly useful for testing.
        """
        self._commands.clear()
        self._discovered = False
        logger.debug("Command registry cleared")


# Global registry instance
_registry = CommandRegistry()


def register_command(name: str) -> Callable[[type[CommandBase]], type[CommandBase]]:
    """
    Decorator to register a command class.

    Usage:
        @register_command("F")
        class ForwardCommand(CommandBase):
            ...
    """

    def decorator(cls: type[CommandBase]) -> type[CommandBase]:
        if not issubclass(cls, CommandBase):
            raise TypeError(f"Class {cls.__name__} must inherit from CommandBase")

        _registry.register(name, cls)
        cls._registered_name = name.upper()
        return cls

    return decorator


# Module-level convenience functions that delegate to the registry singleton
get_command_class = _registry.get_command_class
list_registered_commands = _registry.list_registered_commands
discover_commands = _registry.discover_commands
clear_registry = _registry.clear
create_command = _registry.create_command
