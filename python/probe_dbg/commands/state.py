"""Target state inspection commands."""

from __future__ import annotations

from typing import Sequence

from .base import CommandDescriptor
from ..parser import require_arg
from ..requests import Code, Registers, Stack, StackTrace, Status, Variable, Variables


class StackCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("stack", "Prints the current stack values")

    def parse(self, argv: Sequence[str]) -> Stack:
        return Stack()


class CodeCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("code", "Prints the current code")

    def parse(self, argv: Sequence[str]) -> Code:
        return Code()


class RegistersCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("registers", "Print all register values")

    def parse(self, argv: Sequence[str]) -> Registers:
        return Registers()


class VariableCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("variable", "Print the value of a variable")

    def parse(self, argv: Sequence[str]) -> Variable:
        return Variable(name=require_arg(argv, 0, self.name, "name"))


class VariablesCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("variables", "Print all local variables")

    def parse(self, argv: Sequence[str]) -> Variables:
        return Variables()


class StackTraceCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("stack-trace", "Print stack trace")

    def parse(self, argv: Sequence[str]) -> StackTrace:
        return StackTrace()


class StatusCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("status", "Print the status of the core")

    def parse(self, argv: Sequence[str]) -> Status:
        return Status()
