"""Command registry for probe-dbg."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .base import CommandDescriptor
from .breakpoints import ClearAllBreakpointsCommand, ClearBreakpointCommand, SetBreakpointCommand
from .control import ContinueCommand, FlashCommand, HaltCommand, ResetCommand, StepCommand
from .exit import ExitCommand
from .memory import ReadCommand
from .session import (
    AttachCommand,
    SetBinaryCommand,
    SetChipCommand,
    SetProbeNumberCommand,
    SetWorkDirectoryCommand,
)
from .state import (
    CodeCommand,
    RegistersCommand,
    StackCommand,
    StackTraceCommand,
    StatusCommand,
    VariableCommand,
    VariablesCommand,
)
from ..errors import EmptyCommandError, UnknownCommandError
from ..parser import split_command
from ..requests import Command

HELP_COMMAND = "help"
HELP_HEADER = "Available commands:"


class CommandRegistry:
    """Immutable table of command descriptors, in registration order."""

    def __init__(self, commands: Iterable[CommandDescriptor]) -> None:
        ordered: List[CommandDescriptor] = []
        by_name: Dict[str, CommandDescriptor] = {}
        for command in commands:
            if command.name in by_name:
                raise ValueError(f"duplicate command name '{command.name}'")
            by_name[command.name] = command
            ordered.append(command)
        self._commands = by_name
        self._ordered: Tuple[CommandDescriptor, ...] = tuple(ordered)

    def get(self, name: str) -> Optional[CommandDescriptor]:
        return self._commands.get(name)

    def list_commands(self) -> Tuple[CommandDescriptor, ...]:
        return self._ordered

    def names(self) -> List[str]:
        return [command.name for command in self.list_commands()]

    def parse_command(self, line: str) -> Command:
        """Parse *line* into a :class:`Command`.

        Raises :class:`EmptyCommandError` for a blank line and
        :class:`UnknownCommandError` when the first token names no command.
        Argument errors from the command's parser propagate unchanged.
        """
        argv = split_command(line)
        if not argv:
            raise EmptyCommandError()
        cmd_name, *cmd_args = argv
        command = self.get(cmd_name)
        if command is None:
            raise UnknownCommandError(cmd_name)
        return Command(command.parse(cmd_args))

    def check_if_help(self, line: str) -> Optional[str]:
        """Return the help listing if *line* is a ``help`` request."""
        argv = split_command(line)
        if not argv or argv[0] != HELP_COMMAND:
            return None
        entries = [HELP_HEADER]
        entries.extend(f"\t{command.format_help()}" for command in self.list_commands())
        return "\n".join(entries)


def build_registry() -> CommandRegistry:
    commands = [
        AttachCommand(),
        SetWorkDirectoryCommand(),
        StackCommand(),
        CodeCommand(),
        ClearAllBreakpointsCommand(),
        ClearBreakpointCommand(),
        SetBreakpointCommand(),
        RegistersCommand(),
        VariableCommand(),
        VariablesCommand(),
        SetChipCommand(),
        SetProbeNumberCommand(),
        StackTraceCommand(),
        ReadCommand(),
        ResetCommand(),
        FlashCommand(),
        StepCommand(),
        StatusCommand(),
        ExitCommand(),
        ContinueCommand(),
        HaltCommand(),
        SetBinaryCommand(),
    ]
    return CommandRegistry(commands)


__all__ = ["CommandDescriptor", "CommandRegistry", "HELP_COMMAND", "build_registry"]
