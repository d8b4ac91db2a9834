"""
Nested list flattening for Apple Notes bodies.

Notes does not reliably display a list nested inside a list item when the
body arrives through AppleScript. Ordered lists are therefore rewritten into
a flat run of block elements:

  <ol><li>Intro</li><li>Steps<ul><li>a</li><li>b</li></ul></li></ol>

becomes

  <div><b>1. Intro</b></div>
  <div><b><span style='color:#1D6FD8'>2. Steps</span></b></div>
  <div>&nbsp;&nbsp;&nbsp;&nbsp;• a</div>
  <div>&nbsp;&nbsp;&nbsp;&nbsp;• b</div>
  <div><br></div>

Element boundaries are found with a depth counter over the open/close tags of
one element name, so a closing tag that belongs to a nested item never ends
the enclosing item. No HTML parser is involved.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Dict, List, Optional, Pattern, Tuple

from .escaping import escape_for_literal_embedded_markup, unescape_literal
from .options import DEFAULT_CONFIG, FormatConfig

LOGGER = logging.getLogger(__name__)

_OPEN_LI_RE = re.compile(r"<li\b[^>]*>", re.IGNORECASE)
_LIST_OPEN_RE = re.compile(r"<(ul|ol|li)\b[^>]*>", re.IGNORECASE)
_NESTED_OPEN_RE = re.compile(r"<(ul|ol)\b[^>]*>", re.IGNORECASE)
_LIST_TAG_RE = re.compile(r"<(/?)(ul|ol|li)\b[^>]*>", re.IGNORECASE)
_BREAKING_TAG_RE = re.compile(
    r"<(?:br|/?(?:p|div|li|ul|ol))\b[^>]*>", re.IGNORECASE
)
_ANY_TAG_RE = re.compile(r"<[^>]*>")

_TAG_PAIR_CACHE: Dict[str, Pattern[str]] = {}


def _tag_pair_re(name: str) -> Pattern[str]:
    pat = _TAG_PAIR_CACHE.get(name)
    if pat is None:
        pat = re.compile(rf"<(/?){name}\b[^>]*>", re.IGNORECASE)
        _TAG_PAIR_CACHE[name] = pat
    return pat


def _find_close(markup: str, name: str, start: int) -> Optional[Tuple[int, int]]:
    """Return the (start, end) span of the tag closing an element of ``name``.

    ``start`` is the index just past the element's opening tag. Returns None
    when the element is never closed.
    """
    depth = 1
    for m in _tag_pair_re(name).finditer(markup, start):
        depth += -1 if m.group(1) else 1
        if depth == 0:
            return m.start(), m.end()
    return None


def _split_items(inner: str) -> Tuple[List[str], Optional[str]]:
    """Split list content into top-level item bodies.

    Returns (bodies, remainder). ``remainder`` is the content starting at the
    first item that has no closing tag, or None when every item was closed.
    Anything between items is dropped.
    """
    bodies: List[str] = []
    pos = 0
    while True:
        m = _OPEN_LI_RE.search(inner, pos)
        if m is None:
            return bodies, None
        close = _find_close(inner, "li", m.end())
        if close is None:
            LOGGER.debug("notes.lists.unclosed_li at=%d", m.start())
            return bodies, inner[m.start() :]
        bodies.append(inner[m.end() : close[0]])
        pos = close[1]


def _plain_text(fragment: str, literal_escaped: bool) -> str:
    text = _BREAKING_TAG_RE.sub(" ", fragment)
    text = _ANY_TAG_RE.sub("", text)
    if literal_escaped:
        text = unescape_literal(text)
    text = html.unescape(text)
    return " ".join(text.split())


def _item_text(fragment: str, literal_escaped: bool) -> str:
    return escape_for_literal_embedded_markup(_plain_text(fragment, literal_escaped))


def _numbered_label(counter: int, text: str) -> str:
    return f"{counter}. {text}" if text else f"{counter}."


def _flatten_items(
    bodies: List[str], config: FormatConfig, literal_escaped: bool
) -> List[str]:
    blocks: List[str] = []
    for counter, body in enumerate(bodies, start=1):
        nested = _NESTED_OPEN_RE.search(body)
        if nested is None:
            label = _numbered_label(counter, _item_text(body, literal_escaped))
            blocks.append(config.block(f"<b>{label}</b>"))
            continue

        leading = _item_text(body[: nested.start()], literal_escaped)
        label = _numbered_label(counter, leading)
        blocks.append(
            config.block(
                f"<b><span style='color:{config.numbered_color}'>{label}</span></b>"
            )
        )

        close = _find_close(body, nested.group(1).lower(), nested.end())
        if close is None:
            nested_inner, trailing = body[nested.end() :], ""
        else:
            nested_inner, trailing = body[nested.end() : close[0]], body[close[1] :]

        sub_bodies, remainder = _split_items(nested_inner)
        if remainder is not None:
            sub_bodies.append(remainder)
        for sub in sub_bodies:
            text = _item_text(sub, literal_escaped)
            if text:
                blocks.append(config.block(f"{config.indent}{config.bullet} {text}"))

        trailing_text = _item_text(trailing, literal_escaped)
        if trailing_text:
            blocks.append(config.block(f"{config.indent}{trailing_text}"))
        blocks.append(config.spacer)
    return blocks


def has_nested_list(markup: Optional[str]) -> bool:
    """True if any list item contains the opening tag of another list."""
    if not markup:
        return False
    open_items = 0
    for m in _LIST_TAG_RE.finditer(markup):
        closing, name = m.group(1), m.group(2).lower()
        if name == "li":
            open_items = max(open_items - 1, 0) if closing else open_items + 1
        elif not closing and open_items:
            return True
    return False


def flatten_nested_lists(
    markup: Optional[str],
    config: Optional[FormatConfig] = None,
    *,
    literal_escaped: bool = False,
) -> str:
    """Rewrite every top-level ``<ol>`` into flat, Notes-safe blocks.

    Item text is reduced to plain text and escaped for the combined
    AppleScript literal + HTML context. Pass ``literal_escaped=True`` when
    ``markup`` has already been through ``escape_for_literal`` so that
    escaping is not applied twice.

    Malformed input never raises: an ``<ol>`` without ``</ol>`` is left as is
    along with the rest of the input, and a list whose item is never closed
    keeps its unprocessed remainder in an ``<ol start='N'>`` element.
    """
    if not markup:
        return ""
    cfg = config or DEFAULT_CONFIG

    out: List[str] = []
    pos = 0
    lists_done = 0
    while True:
        m = _LIST_OPEN_RE.search(markup, pos)
        if m is None:
            out.append(markup[pos:])
            break
        name = m.group(1).lower()
        close = _find_close(markup, name, m.end())
        if close is None:
            LOGGER.debug("notes.lists.unclosed_%s at=%d", name, m.start())
            out.append(markup[pos:])
            break

        if name != "ol":
            # lists inside a <ul> or a stray <li> are not top-level
            out.append(markup[pos : close[1]])
            pos = close[1]
            continue

        out.append(markup[pos : m.start()])
        bodies, remainder = _split_items(markup[m.end() : close[0]])
        if not bodies:
            out.append(markup[m.start() : close[1]])
        else:
            out.extend(_flatten_items(bodies, cfg, literal_escaped))
            if remainder is not None:
                out.append(f"<ol start='{len(bodies) + 1}'>{remainder}</ol>")
            lists_done += 1
        pos = close[1]

    LOGGER.debug("notes.lists.flatten lists=%d", lists_done)
    return "".join(out)


__all__ = ["has_nested_list", "flatten_nested_lists"]
