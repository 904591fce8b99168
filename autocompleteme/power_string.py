"""String clean-up helpers for user queries."""

import re
import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_REPEATED_SPACES = re.compile(" {2,}")
_EDGE_BLANKS = " \t"


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII letters in lower case."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters in upper case."""
    return text.translate(_TO_UPPER)


def remove_extra_space(text: str) -> str:
    """Strip leading and trailing blanks and collapse runs of spaces to one."""
    return _REPEATED_SPACES.sub(" ", text.lstrip(_EDGE_BLANKS)).rstrip(_EDGE_BLANKS)


def word_format(text: str) -> str:
    """Clean ``text`` and capitalise the first letter of each word."""
    cleaned = to_lower(remove_extra_space(text))
    result = []
    cap_next = True
    for char in cleaned:
        if cap_next and char.isascii() and char.isalpha():
            result.append(char.upper())
            cap_next = False
        else:
            if char == " ":
                cap_next = True
            result.append(char)
    return "".join(result)