"""Output helpers for probe-dbg."""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import PurePath
from typing import Any, Dict, Mapping, Optional

from .context import DebuggerContext
from .requests import DebugRequest


def _json_dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)


def _plain(value: Any) -> Any:
    if isinstance(value, PurePath):
        return str(value)
    return value


def request_payload(request: DebugRequest) -> Dict[str, Any]:
    """Return a JSON-friendly mapping describing *request*."""
    payload: Dict[str, Any] = {"request": request.kind}
    for item in fields(request):
        payload[item.name] = _plain(getattr(request, item.name))
    return payload


def format_request(request: DebugRequest) -> str:
    """Render *request* on one line, addresses in hex."""
    parts = [request.kind]
    for item in fields(request):
        value = getattr(request, item.name)
        if item.name == "address":
            text = f"0x{value:08X}"
        elif value is None:
            text = "-"
        else:
            text = str(_plain(value))
        parts.append(f"{item.name}={text}")
    return " ".join(parts)


def emit_result(ctx: DebuggerContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit a successful command result."""
    if ctx.json_output:
        payload: Dict[str, Any] = {"status": "ok"}
        if data is not None:
            payload["result"] = data
        else:
            payload["message"] = message
        print(_json_dump(payload))
    else:
        print(message)


def emit_error(ctx: DebuggerContext, *, message: str) -> None:
    """Emit an error message respecting JSON mode."""
    payload: Dict[str, Any] = {"status": "error", "error": message}
    if ctx.json_output:
        print(_json_dump(payload))
    else:
        print(f"error: {message}")


__all__ = ["emit_result", "emit_error", "format_request", "request_payload"]
