"""Word splitting and substring search used by the XPM reader."""

import re

_WORD = re.compile(r"[^ \t]+")


def str_to_wordtab(text):
    """Split ``text`` into words separated by runs of spaces and tabs.

    Only spaces and tabs separate words; other whitespace stays inside them.
    """
    return _WORD.findall(text)


def _check_needle(needle):
    if not needle:
        raise ValueError("the text searched for must not be empty")


def find(text, needle, limit):
    """Return where ``needle`` first starts in ``text``, or -1.

    A needle longer than ``limit`` is never found.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text, needle, limit):
    """Return where ``needle`` first starts outside double quotes, or -1.

    Every double quote met while scanning toggles the quoted state, the
    one at the candidate position included. A needle longer than ``limit``
    is never found.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1