"""Term matchers.

Pure functions, no state.  A term is free text (it may contain ``+``, ``%``,
``.`` and friends), so it is always escaped before it becomes part of a
pattern; building a matcher cannot fail for any string.
"""
from __future__ import annotations

import re

# Unicode letters and digits, i.e. \w minus underscore.
_ALNUM = r"[^\W_]"


def escape_term(term: str) -> str:
    """Return *term* with every regex metacharacter escaped."""
    return re.escape(term)


def build_term_pattern(term: str) -> re.Pattern:
    """Case-insensitive matcher for *term* delimited by word boundaries.

    A match may not be immediately preceded or followed by a letter or digit,
    so "hot" never matches inside "hotel".  Boundaries are checked with
    lookarounds rather than ``\\b``: terms may start or end with non-word
    characters ("18+", "đảm bảo 100%"), where ``\\b`` would demand a word
    character on the far side.
    """
    return re.compile(
        rf"(?<!{_ALNUM}){escape_term(term)}(?!{_ALNUM})",
        re.IGNORECASE,
    )
