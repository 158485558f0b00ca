"""probe-dbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Tuple

from .commands import CommandRegistry, build_registry
from .context import DebuggerContext
from .errors import CommandError
from .output import emit_error, emit_result, format_request, request_payload
from .repl import DebuggerREPL, Executor
from .requests import Command, Exit

LOG = logging.getLogger("probe_dbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Probe debugger command line")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("PROBE_DBG_LOG", "INFO"),
        help="Logging level (default INFO)",
    )
    parser.add_argument("--prompt", default="> ", help="Interactive prompt text")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-c",
        "--command",
        help="Parse a single command non-interactively (quote the command string)",
    )
    source.add_argument(
        "-s",
        "--script",
        type=Path,
        help="Parse commands from a file, one per line",
    )
    return parser


def echo_executor(ctx: DebuggerContext) -> Executor:
    """Executor that prints each typed request instead of running it."""

    def execute(command: Command) -> None:
        request = command.request
        emit_result(ctx, message=format_request(request), data=request_payload(request))

    return execute


def main(argv: List[str] | None = None, *, executor: Executor | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    ctx = DebuggerContext(json_output=args.json, prompt=args.prompt)
    registry = build_registry()
    if executor is None:
        executor = echo_executor(ctx)
    if args.command is not None:
        return _run_single_command(ctx, registry, executor, args.command)
    if args.script is not None:
        return _run_script(ctx, registry, executor, args.script)
    repl = DebuggerREPL(ctx, registry, executor)
    try:
        return repl.run()
    except KeyboardInterrupt:
        print()
        return 0


def _run_single_command(ctx: DebuggerContext, registry: CommandRegistry, executor: Executor, line: str) -> int:
    rc, _ = _run_line(ctx, registry, executor, line)
    return rc


def _run_line(ctx: DebuggerContext, registry: CommandRegistry, executor: Executor, line: str) -> Tuple[int, bool]:
    """Parse and execute *line*; returns the exit code and whether an exit was requested."""
    help_text = registry.check_if_help(line)
    if help_text is not None:
        print(help_text)
        return 0, False
    try:
        command = registry.parse_command(line)
    except CommandError as exc:
        emit_error(ctx, message=str(exc))
        return 1, False
    try:
        executor(command)
    except Exception as exc:
        LOG.exception("executor failed")
        emit_error(ctx, message=f"Command '{command.request.kind}' failed: {exc}")
        return 1, False
    return 0, isinstance(command.request, Exit)


def _run_script(ctx: DebuggerContext, registry: CommandRegistry, executor: Executor, path: Path) -> int:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        emit_error(ctx, message=f"Unable to read script {path}: {exc}")
        return 1
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        LOG.debug("script %s:%d: %s", path, lineno, line)
        rc, exiting = _run_line(ctx, registry, executor, line)
        if rc != 0:
            LOG.debug("script stopped at %s:%d", path, lineno)
            return rc
        if exiting:
            LOG.debug("script exit requested at %s:%d", path, lineno)
            return 0
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
