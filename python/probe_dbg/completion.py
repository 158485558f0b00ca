"""prompt_toolkit completer for probe-dbg."""

from __future__ import annotations

from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .commands import HELP_COMMAND, CommandRegistry
from .parser import split_command

BOOLEAN_LITERALS = ("true", "false")
BOOLEAN_COMMANDS = {"reset", "flash"}
# command -> argument positions (1-based, command name is 0) that take a path
PATH_ARGUMENTS = {
    "set-binary": {1},
    "set-work-directory": {1},
    "set-breakpoint": {2},
}


def _normalise_tokens(text: str) -> List[str]:
    tokens = split_command(text)
    if not text or not split_command(text[-1]):
        tokens.append("")
    return tokens


class DebuggerCompleter(Completer):
    """Completes command names, boolean flags and paths."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry
        self._path = PathCompleter(expanduser=True)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        tokens = _normalise_tokens(document.text_before_cursor)
        prefix = tokens[-1]
        position = len(tokens) - 1
        if position == 0:
            yield from self._candidates(self._command_names(), prefix)
            return
        command_name = tokens[0]
        if command_name in BOOLEAN_COMMANDS and position == 1:
            yield from self._candidates(BOOLEAN_LITERALS, prefix)
            return
        if position in PATH_ARGUMENTS.get(command_name, ()):
            path_document = Document(prefix, cursor_position=len(prefix))
            yield from self._path.get_completions(path_document, complete_event)

    def _command_names(self) -> List[str]:
        return sorted({command.name for command in self.registry.list_commands()} | {HELP_COMMAND})

    @staticmethod
    def _candidates(candidates: Iterable[str], prefix: str) -> Iterable[Completion]:
        for entry in candidates:
            if entry.startswith(prefix):
                yield Completion(entry, start_position=-len(prefix))
