"""
Lookup table for the HTML escaping engine.

Maps the five markup-significant ASCII characters to their character
references, and precomputes how many extra characters each replacement adds.
Only codes below ESCAPED_CHARS_TABLE_SIZE are ever escaped; everything at or
above it is passed through untouched.
"""

import cython

__all__ = [
    "DELTAS",
    "ESCAPED_CHARS_TABLE_SIZE",
    "REPLACEMENTS",
    "replacement_and_delta",
]

ESCAPED_CHARS_TABLE_SIZE = 63

_ESCAPED_CHARS = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}


def _build_table():
    replacements = [""] * ESCAPED_CHARS_TABLE_SIZE
    deltas = [0] * ESCAPED_CHARS_TABLE_SIZE
    for char, replacement in _ESCAPED_CHARS.items():
        code = ord(char)
        replacements[code] = replacement
        deltas[code] = len(replacement) - 1

    for code in range(ESCAPED_CHARS_TABLE_SIZE):
        escaped = chr(code) in _ESCAPED_CHARS
        assert (deltas[code] > 0) == escaped == (replacements[code] != ""), (
            f"Inconsistent escape table entry for code {code}"
        )
    return tuple(replacements), tuple(deltas)


# code → replacement sequence ("" when the character is left alone)
# code → len(replacement) - 1 (0 when the character is left alone)
REPLACEMENTS, DELTAS = _build_table()


@cython.ccall
def replacement_and_delta(code: cython.Py_ssize_t):
    """Return (replacement, delta) for a character code, ("", 0) if none."""
    if code < 0 or code >= ESCAPED_CHARS_TABLE_SIZE:
        return "", 0
    return REPLACEMENTS[code], DELTAS[code]
