"""DOT string literals and attribute blocks."""

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_UNESCAPES = {escaped[1]: char for char, escaped in _ESCAPES.items()}


def _escape_char(char: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    if char < " " or char == "\x7f":
        return f"\\u{ord(char):04x}"
    return char


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted DOT literal.

    Backslashes and quotes are always escaped, so the literal can only end at
    its closing quote. Newline, carriage return and tab become the DOT
    escapes ``\\n``, ``\\r`` and ``\\t``. Other control characters become
    ``\\uXXXX``; DOT has no such escape, so Graphviz draws them as that
    literal text, but the literal stays valid and :func:`unquote` restores
    the original character.

    >>> quote('say "hi"')
    '"say \\\\"hi\\\\""'
    """
    return '"' + "".join(_escape_char(char) for char in text) + '"'


def unquote(literal: str) -> str:
    """Invert :func:`quote`.

    Raises:
        ValueError: If ``literal`` is not a literal produced by :func:`quote`
    """
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise ValueError(f"not a quoted literal: {literal!r}")

    body = literal[1:-1]
    chars = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == '"':
            raise ValueError(f"unescaped quote at offset {i + 1} in {literal!r}")
        if char != "\\":
            chars.append(char)
            i += 1
            continue

        if i + 1 >= len(body):
            raise ValueError(f"dangling backslash in {literal!r}")
        code = body[i + 1]
        if code in _UNESCAPES:
            chars.append(_UNESCAPES[code])
            i += 2
        elif code == "u" and i + 6 <= len(body):
            chars.append(chr(int(body[i + 2:i + 6], 16)))
            i += 6
        else:
            raise ValueError(f"unknown escape '\\{code}' in {literal!r}")

    return "".join(chars)


def format_number(value: int | float) -> str:
    """Format a number as plain decimal, never in scientific notation."""
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if "e" in text and math.isfinite(value):
        text = format(Decimal(text), "f")
    return text


def format_value(value: Any) -> str:
    """Format an attribute value for the right-hand side of ``key=value``."""
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return quote(str(value))


def format_attributes(pairs: Iterable[tuple[str, Any]]) -> str:
    """Render ``key=value;`` for every pair whose value is not None."""
    return "".join(f"{key}={format_value(value)};" for key, value in pairs if value is not None)
