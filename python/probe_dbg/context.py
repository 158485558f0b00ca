"""Front-end configuration shared by the CLI and the REPL."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DebuggerContext:
    """Holds shared CLI debugger settings."""

    json_output: bool = False
    prompt: str = "> "
