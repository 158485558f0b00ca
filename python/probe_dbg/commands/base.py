"""Command descriptor base class for probe-dbg."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..requests import DebugRequest


@dataclass(frozen=True)
class CommandDescriptor:
    """Static definition of one command: its name, help text and parser."""

    name: str
    description: str

    def parse(self, argv: Sequence[str]) -> DebugRequest:
        raise NotImplementedError("Command must implement parse()")

    def format_help(self) -> str:
        return f"- {self.name}: {self.description}"
