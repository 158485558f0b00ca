"""Hardware breakpoint commands."""

from __future__ import annotations

from typing import Sequence

from .base import CommandDescriptor
from ..parser import parse_u32, require_arg
from ..requests import ClearAllBreakpoints, ClearBreakpoint, SetBreakpoint


class ClearAllBreakpointsCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("clear-all-breakpoints", "Removes all hardware breakpoints")

    def parse(self, argv: Sequence[str]) -> ClearAllBreakpoints:
        return ClearAllBreakpoints()


class ClearBreakpointCommand(CommandDescriptor):
    def __init__(self) -> None:
        super().__init__("clear-breakpoint", "Remove a hardware breakpoint")

    def parse(self, argv: Sequence[str]) -> ClearBreakpoint:
        address = parse_u32(require_arg(argv, 0, self.name, "address"))
        return ClearBreakpoint(address=address)


class SetBreakpointCommand(CommandDescriptor):
    """``set-breakpoint <address> [source_file]``"""

    def __init__(self) -> None:
        super().__init__("set-breakpoint", "Set a hardware breakpoint")

    def parse(self, argv: Sequence[str]) -> SetBreakpoint:
        address = parse_u32(require_arg(argv, 0, self.name, "address"))
        source_file = argv[1] if len(argv) > 1 else None
        return SetBreakpoint(address=address, source_file=source_file)
