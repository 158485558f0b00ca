"""Execution control commands (reset/flash/step/continue/halt)."""

from __future__ import annotations

from typing import Sequence

from .base import CommandDescriptor
from ..parser import parse_bool
from ..requests import Continue, Flash, Halt, Reset, Step


def _reset_and_halt(argv: Sequence[str]) -> bool:
    return parse_bool(argv[0]) if argv else False


class ResetCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("reset", "Reset or reset and halt the core")

    def parse(self, argv: Sequence[str]) -> Reset:
        return Reset(reset_and_halt=_reset_and_halt(argv))


class FlashCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("flash", "Flash target with binary file")

    def parse(self, argv: Sequence[str]) -> Flash:
        return Flash(reset_and_halt=_reset_and_halt(argv))


class StepCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("step", "Step one assembly instruction")

    def parse(self, argv: Sequence[str]) -> Step:
        return Step()


class ContinueCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("continue", "Continue the program")

    def parse(self, argv: Sequence[str]) -> Continue:
        return Continue()


class HaltCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("halt", "Halt the core")

    def parse(self, argv: Sequence[str]) -> Halt:
        return Halt()
