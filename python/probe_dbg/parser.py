"""Tokenizer and scalar argument parsers for probe-dbg command lines."""

from __future__ import annotations

import re
from typing import List, Sequence

from .errors import MalformedBooleanError, MalformedNumericError, MissingArgumentError

U32_MAX = 0xFFFFFFFF
HEX_PREFIX = "0x"

# Unicode White_Space; str.split() would also break on U+001C..U+001F.
_SEPARATORS = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)

# int() also accepts underscores, whitespace, signs and non-ASCII digits.
_DIGITS = {
    10: re.compile(r"\+?[0-9]+"),
    16: re.compile(r"\+?[0-9a-fA-F]+"),
}


def split_command(line: str) -> List[str]:
    """Split a command line into argv tokens on whitespace."""
    if not line:
        return []
    return [token for token in _SEPARATORS.split(line) if token]


def parse_u32(token: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal unsigned 32-bit value."""
    if token.startswith(HEX_PREFIX):
        digits, base = token[len(HEX_PREFIX) :], 16
    else:
        digits, base = token, 10
    if not digits:
        raise MalformedNumericError(token, "cannot parse integer from empty string")
    if not _DIGITS[base].fullmatch(digits):
        raise MalformedNumericError(token, "invalid digit found in string")
    value = int(digits, base)
    if value > U32_MAX:
        raise MalformedNumericError(token, "number too large to fit in target type")
    return value


def parse_bool(token: str) -> bool:
    if token == "true":
        return True
    if token == "false":
        return False
    raise MalformedBooleanError(token)


def require_arg(argv: Sequence[str], index: int, command: str, argument: str) -> str:
    """Return ``argv[index]`` or raise :class:`MissingArgumentError`."""
    if index < len(argv):
        return argv[index]
    raise MissingArgumentError(command, argument)


__all__ = ["U32_MAX", "split_command", "parse_u32", "parse_bool", "require_arg"]
