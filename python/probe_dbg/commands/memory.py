"""Memory inspection command."""

from __future__ import annotations

from typing import Sequence

from .base import CommandDescriptor
from ..parser import parse_u32, require_arg
from ..requests import DEFAULT_READ_SIZE, Read


class ReadCommand(CommandDescriptor):
    """``read <address> [byte_size]``; the size defaults to one 32-bit word."""

    def __init__(self) -> None:
        super().__init__("read", "Read address in memory")

    def parse(self, argv: Sequence[str]) -> Read:
        address = parse_u32(require_arg(argv, 0, self.name, "address"))
        byte_size = parse_u32(argv[1]) if len(argv) > 1 else DEFAULT_READ_SIZE
        return Read(address=address, byte_size=byte_size)
