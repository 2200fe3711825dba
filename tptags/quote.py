"""Quote-and-escape primitive for tag strings.

Produces the same double-quoted form a debug string formatter does: quote and
backslash are escaped, control characters get short or hex escapes, and any
other printable character (non-ASCII included) is left untouched.
"""

import unicodedata

QUOTE = '"'

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

_SHORT_UNESCAPES = {v[1]: k for k, v in _SHORT_ESCAPES.items()}

# Number of hex digits that follow each numeric escape letter
_HEX_WIDTHS = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS = "0123456789abcdefABCDEF"


def is_printable(ch: str) -> bool:
    """Return True for letters, marks, numbers, punctuation, symbols and ASCII space."""
    if ch == " ":
        return True
    return unicodedata.category(ch)[0] in "LMNPS"


def _escape_char(ch: str) -> str:
    if ch == QUOTE or ch == "\\":
        return "\\" + ch
    if is_printable(ch):
        return ch
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]

    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(s: str) -> str:
    """Return ``s`` wrapped in double quotes with unsafe characters escaped.

    Args:
        s: Raw string

    Returns:
        Quoted string like ``"ab\\"cd"``
    """
    return QUOTE + "".join(_escape_char(ch) for ch in s) + QUOTE


def unquote(s: str) -> str:
    """Reverse :func:`quote`.

    Args:
        s: Double-quoted string exactly as produced by quote()

    Returns:
        The raw string

    Raises:
        ValueError: If the input is malformed, holds unescaped non-printable
            characters, or is not the form quote() would write (e.g. ``\\xff``
            instead of ``\\u00ff``).
    """
    if len(s) < 2 or s[0] != QUOTE or s[-1] != QUOTE:
        raise ValueError(f"Not a quoted string: {s!r}")

    body = s[1:-1]
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == QUOTE:
            raise ValueError(f"Unescaped quote at offset {i + 1}")
        if ch != "\\":
            if not is_printable(ch):
                raise ValueError(f"Unescaped non-printable character {ch!r} at offset {i + 1}")
            out.append(ch)
            i += 1
            continue

        if i + 1 >= len(body):
            raise ValueError("Trailing backslash")
        esc = body[i + 1]
        if esc in (QUOTE, "\\"):
            out.append(esc)
            i += 2
        elif esc in _SHORT_UNESCAPES:
            out.append(_SHORT_UNESCAPES[esc])
            i += 2
        elif esc in _HEX_WIDTHS:
            width = _HEX_WIDTHS[esc]
            digits = body[i + 2 : i + 2 + width]
            if len(digits) != width:
                raise ValueError(f"Truncated \\{esc} escape at offset {i + 1}")
            if not all(c in _HEX_DIGITS for c in digits):
                raise ValueError(f"Invalid \\{esc} escape: {digits!r}")
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise ValueError(f"Escape out of range: {digits!r}")
            out.append(chr(code))
            i += 2 + width
        else:
            raise ValueError(f"Unknown escape sequence: \\{esc}")

    raw = "".join(out)
    # Only the exact form quote() writes is accepted
    if quote(raw) != s:
        raise ValueError(f"Not in canonical quoted form: {s!r}")
    return raw
