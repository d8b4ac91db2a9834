"""
Context-aware escaping for note content sent to Apple Notes via AppleScript.

Three contexts exist:
  - LITERAL: text placed between the double quotes of an AppleScript string.
  - MARKUP: text placed inside HTML, as entities.
  - LITERAL_MARKUP: text that is both HTML text and part of an AppleScript
    string literal (the body of a note).

Each context owns exactly one ordered replacement table. The order inside a
table matters: the escape character of a context is always replaced first so
later replacements are not escaped a second time.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Optional, Tuple

# Stands in for '"' inside note bodies; Notes does not reliably render &quot;
# that arrives through an AppleScript literal.
QUOTE_LOOKALIKE = "“"


class EscapeContext(Enum):
    LITERAL = "literal"
    MARKUP = "markup"
    LITERAL_MARKUP = "literal_markup"


_TABLES: Dict[EscapeContext, Tuple[Tuple[str, str], ...]] = {
    EscapeContext.LITERAL: (
        ("\\", "\\\\"),
        ('"', '\\"'),
    ),
    EscapeContext.MARKUP: (
        ("&", "&amp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ('"', "&quot;"),
        ("'", "&#39;"),
    ),
    EscapeContext.LITERAL_MARKUP: (
        ("\\", "\\\\"),
        ("&", "&amp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ('"', QUOTE_LOOKALIKE),
        ("'", "&#39;"),
    ),
}

_LITERAL_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def escape(text: Optional[str], context: EscapeContext) -> str:
    """Escape ``text`` for ``context``. ``None`` and ``""`` give ``""``."""
    if not text:
        return ""
    out = text
    for needle, replacement in _TABLES[context]:
        out = out.replace(needle, replacement)
    return out


def escape_for_literal(text: Optional[str]) -> str:
    return escape(text, EscapeContext.LITERAL)


def escape_for_markup_entities(text: Optional[str]) -> str:
    return escape(text, EscapeContext.MARKUP)


def escape_for_literal_embedded_markup(text: Optional[str]) -> str:
    return escape(text, EscapeContext.LITERAL_MARKUP)


def unescape_literal(text: Optional[str]) -> str:
    """Undo :func:`escape_for_literal`.

    Used when text that already went through the LITERAL context has to be
    escaped again for LITERAL_MARKUP.
    """
    if not text:
        return ""
    return _LITERAL_ESCAPE_RE.sub(r"\1", text)


__all__ = [
    "EscapeContext",
    "QUOTE_LOOKALIKE",
    "escape",
    "escape_for_literal",
    "escape_for_markup_entities",
    "escape_for_literal_embedded_markup",
    "unescape_literal",
]
