"""Interactive REPL for probe-dbg."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from .commands import CommandRegistry
from .completion import DebuggerCompleter
from .context import DebuggerContext
from .errors import CommandError
from .output import emit_error
from .requests import Command, Exit

LOGGER = logging.getLogger("probe_dbg.repl")

Executor = Callable[[Command], None]


class DebuggerREPL:
    """prompt-toolkit REPL feeding parsed commands to an executor.

    Falls back to ``input()`` when stdin is not a terminal.
    """

    def __init__(
        self,
        ctx: DebuggerContext,
        registry: CommandRegistry,
        executor: Executor,
        *,
        interactive: Optional[bool] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.executor = executor
        self.interactive = sys.stdin.isatty() if interactive is None else interactive

    def run(self) -> int:
        if not self.interactive:
            return self._fallback_loop()
        session: PromptSession[str] = PromptSession(
            self.ctx.prompt,
            history=InMemoryHistory(),
            completer=DebuggerCompleter(self.registry),
            complete_while_typing=True,
        )
        buffer: list[str] = []
        while True:
            try:
                with patch_stdout():
                    line = session.prompt()
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            if self._handle_multiline(buffer, line):
                continue
            payload = " ".join(buffer) if buffer else line
            buffer.clear()
            if not self.dispatch(payload):
                return 0

    def _fallback_loop(self) -> int:
        buffer: list[str] = []
        while True:
            try:
                line = input(self.ctx.prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            if self._handle_multiline(buffer, line):
                continue
            payload = " ".join(buffer) if buffer else line
            buffer.clear()
            if not self.dispatch(payload):
                return 0

    def dispatch(self, line: str) -> bool:
        """Handle one line; returns False once an exit request was executed."""
        if not line.strip():
            return True
        help_text = self.registry.check_if_help(line)
        if help_text is not None:
            print(help_text)
            return True
        try:
            command = self.registry.parse_command(line)
        except CommandError as exc:
            emit_error(self.ctx, message=str(exc))
            return True
        try:
            self.executor(command)
        except Exception as exc:
            LOGGER.exception("executor failed")
            emit_error(self.ctx, message=f"Command '{command.request.kind}' failed: {exc}")
            return True
        return not isinstance(command.request, Exit)

    def _handle_multiline(self, buffer: list[str], line: str) -> bool:
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            buffer.append(stripped[:-1])
            return True
        if buffer:
            buffer.append(stripped)
            return False
        return False
