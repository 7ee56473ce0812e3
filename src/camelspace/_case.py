"""Name transcoding between SCREAMING_SNAKE_CASE and camelCase.

Words are split the same way for both directions, so a key that is already
``CONSTANT_CASE`` survives ``to_constant_case(to_camel_case(key))`` intact::

    >>> to_camel_case("MY_APP_CORE_MODE")
    'myAppCoreMode'
    >>> to_constant_case("myAppCoreMode")
    'MY_APP_CORE_MODE'
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Word splitting
# ---------------------------------------------------------------------------

_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_UPPER_WORD_RE = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")

_VALID_KEY_RE = re.compile(r"[A-Z][A-Z0-9_]+")


def _split_words(value: str) -> list[str]:
    """Split *value* into words on case boundaries and non-alphanumerics."""
    spaced = _LOWER_UPPER_RE.sub(r"\1 \2", value)
    spaced = _UPPER_WORD_RE.sub(r"\1 \2", spaced)
    return _SEPARATOR_RE.sub(" ", spaced).split()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def to_camel_case(value: str) -> str:
    """Convert an identifier to camelCase.

    The first word is lowercased, later words are capitalised. A later word
    starting with a digit keeps an underscore in front of it so the word
    boundary is not lost (``"A_1"`` becomes ``"a_1"``).
    """
    parts: list[str] = []
    for index, word in enumerate(_split_words(value)):
        if index == 0:
            parts.append(word.lower())
        elif word[0].isdigit():
            parts.append(f"_{word.lower()}")
        else:
            parts.append(word[0].upper() + word[1:].lower())
    return "".join(parts)


def to_constant_case(value: str) -> str:
    """Convert an identifier to SCREAMING_SNAKE_CASE."""
    return "_".join(word.upper() for word in _split_words(value))


def is_valid_key_name(value: str) -> bool:
    """Return ``True`` if *value* looks like an uppercase environment key.

    The pattern is searched, not anchored: any substring of one uppercase
    letter followed by one or more uppercase letters, digits or underscores
    is enough. ``"HOST"`` and ``"MY_VAR"`` pass; ``"port"``, ``"X"`` and
    ``"_1"`` do not.
    """
    return _VALID_KEY_RE.search(value) is not None
