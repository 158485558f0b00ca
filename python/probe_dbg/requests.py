"""Typed debug requests produced by the command parser.

Each dataclass is one variant of :data:`DebugRequest` and carries only the
fields its operation needs.  The ``kind`` tag matches the command name that
produces it.  Requests are handed to the debug-session executor wrapped in a
:class:`Command` envelope; nothing in this package acts on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Union

DEFAULT_READ_SIZE = 4


@dataclass(frozen=True)
class Attach:
    kind: ClassVar[str] = "attach"
    reset: bool = False
    reset_and_halt: bool = False


@dataclass(frozen=True)
class SetWorkDirectory:
    kind: ClassVar[str] = "set-work-directory"
    cwd: str


@dataclass(frozen=True)
class Stack:
    kind: ClassVar[str] = "stack"


@dataclass(frozen=True)
class Code:
    kind: ClassVar[str] = "code"


@dataclass(frozen=True)
class ClearAllBreakpoints:
    kind: ClassVar[str] = "clear-all-breakpoints"


@dataclass(frozen=True)
class ClearBreakpoint:
    kind: ClassVar[str] = "clear-breakpoint"
    address: int


@dataclass(frozen=True)
class SetBreakpoint:
    kind: ClassVar[str] = "set-breakpoint"
    address: int
    source_file: Optional[str] = None


@dataclass(frozen=True)
class Registers:
    kind: ClassVar[str] = "registers"


@dataclass(frozen=True)
class Variable:
    kind: ClassVar[str] = "variable"
    name: str


@dataclass(frozen=True)
class Variables:
    kind: ClassVar[str] = "variables"


@dataclass(frozen=True)
class SetChip:
    kind: ClassVar[str] = "set-chip"
    chip: str


@dataclass(frozen=True)
class SetProbeNumber:
    kind: ClassVar[str] = "set-probe-number"
    number: int


@dataclass(frozen=True)
class StackTrace:
    kind: ClassVar[str] = "stack-trace"


@dataclass(frozen=True)
class Read:
    kind: ClassVar[str] = "read"
    address: int
    byte_size: int = DEFAULT_READ_SIZE


@dataclass(frozen=True)
class Reset:
    kind: ClassVar[str] = "reset"
    reset_and_halt: bool = False


@dataclass(frozen=True)
class Flash:
    kind: ClassVar[str] = "flash"
    reset_and_halt: bool = False


@dataclass(frozen=True)
class Step:
    kind: ClassVar[str] = "step"


@dataclass(frozen=True)
class Status:
    kind: ClassVar[str] = "status"


@dataclass(frozen=True)
class Exit:
    kind: ClassVar[str] = "exit"


@dataclass(frozen=True)
class Continue:
    kind: ClassVar[str] = "continue"


@dataclass(frozen=True)
class Halt:
    kind: ClassVar[str] = "halt"


@dataclass(frozen=True)
class SetBinary:
    kind: ClassVar[str] = "set-binary"
    path: Path


DebugRequest = Union[
    Attach,
    SetWorkDirectory,
    Stack,
    Code,
    ClearAllBreakpoints,
    ClearBreakpoint,
    SetBreakpoint,
    Registers,
    Variable,
    Variables,
    SetChip,
    SetProbeNumber,
    StackTrace,
    Read,
    Reset,
    Flash,
    Step,
    Status,
    Exit,
    Continue,
    Halt,
    SetBinary,
]


@dataclass(frozen=True)
class Command:
    """Envelope handed to the executor; currently always wraps a request."""

    request: DebugRequest


__all__ = [
    "DEFAULT_READ_SIZE",
    "Attach",
    "SetWorkDirectory",
    "Stack",
    "Code",
    "ClearAllBreakpoints",
    "ClearBreakpoint",
    "SetBreakpoint",
    "Registers",
    "Variable",
    "Variables",
    "SetChip",
    "SetProbeNumber",
    "StackTrace",
    "Read",
    "Reset",
    "Flash",
    "Step",
    "Status",
    "Exit",
    "Continue",
    "Halt",
    "SetBinary",
    "DebugRequest",
    "Command",
]
