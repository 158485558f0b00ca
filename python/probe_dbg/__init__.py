"""
probe-dbg command parser.

Turns one line of interactive text into a typed debug request for an
external debug-session executor (the component that drives the probe).
Parsing is pure: no I/O, no session state.  ``python -m probe_dbg`` starts
an interactive front-end that echoes the parsed requests.
"""

from __future__ import annotations

from .commands import CommandDescriptor, CommandRegistry, build_registry
from .errors import (
    CommandError,
    EmptyCommandError,
    MalformedBooleanError,
    MalformedNumericError,
    MissingArgumentError,
    UnknownCommandError,
)
from .parser import parse_bool, parse_u32
from .requests import Command, DebugRequest

__all__ = [
    "Command",
    "CommandDescriptor",
    "CommandError",
    "CommandRegistry",
    "DebugRequest",
    "EmptyCommandError",
    "MalformedBooleanError",
    "MalformedNumericError",
    "MissingArgumentError",
    "UnknownCommandError",
    "build_registry",
    "parse_bool",
    "parse_u32",
]
__version__ = "0.1.0"
