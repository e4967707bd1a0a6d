"""
Cython-accelerated HTML escaping for the template engine.

escape() rewrites the characters ", ', &, < and > into character references
and marks the result safe, so the template layer doesn't escape it twice.
The text is scanned once to measure the escaped size and, only when something
needs replacing, a second time to build the output. Text without special
characters is returned as-is (zero allocation).
"""

import cython

from .escapetable import DELTAS, ESCAPED_CHARS_TABLE_SIZE, REPLACEMENTS
from .safestring import make_safe

__all__ = ["escape", "escape_text", "soft_str"]

_TABLE_SIZE: cython.Py_ssize_t = ESCAPED_CHARS_TABLE_SIZE


@cython.cfunc
def _delta(c: cython.Py_UCS4) -> cython.Py_ssize_t:
    code: cython.Py_ssize_t = ord(c)
    if code >= _TABLE_SIZE:
        return 0
    return DELTAS[code]


@cython.ccall
def escape_text(s: str):
    """
    Return s with ampersands, quotes and angle brackets encoded for use in
    HTML. Existing entities are escaped again ("&amp;" -> "&amp;amp;").
    """
    length: cython.Py_ssize_t = len(s)
    extra: cython.Py_ssize_t = 0
    count: cython.Py_ssize_t = 0
    delta: cython.Py_ssize_t
    c: cython.Py_UCS4

    for c in s:
        delta = _delta(c)
        if delta:
            extra += delta
            count += 1

    if not count:
        return s

    parts = []
    pos: cython.Py_ssize_t = 0
    nxt: cython.Py_ssize_t
    while count > 0:
        nxt = pos
        while nxt < length and not _delta(s[nxt]):
            nxt += 1
        if nxt > pos:
            parts.append(s[pos:nxt])
        parts.append(REPLACEMENTS[ord(s[nxt])])
        pos = nxt + 1
        count -= 1
    if pos < length:
        parts.append(s[pos:])

    result = "".join(parts)
    assert len(result) == length + extra, (
        f"Escaped length {len(result)} != measured length {length + extra}"
    )
    return result


@cython.ccall
def escape(text):
    """
    Escape text for HTML and mark the result safe.

    None, ints, floats and bools can't contain markup and are only marked
    safe. Objects implementing __html__ escape themselves and their result is
    returned untouched. Anything else is converted with str() and escaped.
    """
    cls = type(text)
    if text is None or cls is int or cls is float or cls is bool:
        return make_safe(text)
    html = getattr(text, "__html__", None)
    if html is not None:
        return html()
    if not isinstance(text, str):
        text = str(text)
    return make_safe(escape_text(text))


@cython.ccall
def soft_str(value):
    """
    Make value a string if it isn't already. Strings, including safe strings,
    are returned as-is so they aren't converted back to plain text.
    """
    if isinstance(value, str):
        return value
    return str(value)
