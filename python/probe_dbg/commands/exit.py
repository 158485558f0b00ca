"""Exit command."""

from __future__ import annotations

from typing import Sequence

from .base import CommandDescriptor
from ..requests import Exit


class ExitCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("exit", "Exit debugger")

    def parse(self, argv: Sequence[str]) -> Exit:
        return Exit()
