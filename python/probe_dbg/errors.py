"""Exceptions raised while turning a command line into a debug request."""

from __future__ import annotations


class CommandError(ValueError):
    """Base class for every command parse failure."""


class EmptyCommandError(CommandError):
    def __init__(self) -> None:
        super().__init__("Empty command")


class UnknownCommandError(CommandError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command '{name}'\n\tEnter 'help' for a list of commands")
        self.name = name


class MissingArgumentError(CommandError):
    """A required positional token was not supplied."""

    def __init__(self, command: str, argument: str) -> None:
        super().__init__("Requires a value as an argument")
        self.command = command
        self.argument = argument


class MalformedNumericError(CommandError):
    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Invalid number '{token}': {reason}")
        self.token = token
        self.reason = reason


class MalformedBooleanError(CommandError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Expected a boolean argument (true/false), got '{token}'")
        self.token = token


__all__ = [
    "CommandError",
    "EmptyCommandError",
    "UnknownCommandError",
    "MissingArgumentError",
    "MalformedNumericError",
    "MalformedBooleanError",
]
