"""
Note body formatter: raw text or HTML fragment -> AppleScript-safe HTML.

Pipeline (the order is part of the contract):
  1. empty input -> ""
  2. escape backslashes and double quotes for the AppleScript literal
  3. detect markup
  4. markup: tidy whitespace inside lists, flatten nested lists, convert the
     remaining line breaks that are outside tags
  5. plain text: convert every line break
  6. wrap in <html><body>...</body></html>
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .escaping import escape_for_literal
from .lists import flatten_nested_lists, has_nested_list
from .options import DEFAULT_CONFIG, FormatConfig

LOGGER = logging.getLogger(__name__)

_MARKUP_RE = re.compile(r"</?[A-Za-z][A-Za-z0-9]*\b[^>]*>")

_LIST_TAG = r"(?:ul|ol|li)"
# One match per whitespace run, optionally preceded by a list tag. Nothing
# follows the greedy run, so the scan never backtracks into it.
_WS_RUN_RE = re.compile(rf"(</?{_LIST_TAG}\b[^>]*>)?(\s+)", re.IGNORECASE)
_LIST_TAG_AHEAD_RE = re.compile(rf"</?{_LIST_TAG}\b", re.IGNORECASE)
_LIST_CLOSE_AHEAD_RE = re.compile(rf"</{_LIST_TAG}\s*>", re.IGNORECASE)


def has_markup(text: Optional[str]) -> bool:
    return bool(text) and _MARKUP_RE.search(text) is not None


def _drop_list_break(m: "re.Match[str]") -> str:
    tag, run = m.group(1) or "", m.group(2)
    if "\n" not in run:
        return m.group(0)
    after = m.end()
    if tag and (
        not tag.startswith("</") or _LIST_TAG_AHEAD_RE.match(m.string, after)
    ):
        return tag
    if _LIST_CLOSE_AHEAD_RE.match(m.string, after):
        return tag
    return m.group(0)


def normalize_list_whitespace(markup: str) -> str:
    """Drop line breaks right inside list boundaries.

    Notes turns those line breaks into empty bulleted lines. A whitespace run
    containing a newline is removed when it follows an opening list tag, sits
    between two list tags, or precedes a closing list tag.
    """
    return _WS_RUN_RE.sub(_drop_list_break, markup)


def convert_line_breaks(markup: str) -> str:
    """Turn newlines that are outside of tags into ``<br>``.

    A newline is inside a tag when a '>' follows it before the next '<'.
    """
    parts = markup.split("<")
    for i, part in enumerate(parts):
        cut = part.rfind(">") + 1
        parts[i] = part[:cut] + part[cut:].replace("\n", "<br>")
    return "<".join(parts)


class ContentFormatter:
    """Builds the ``body:"..."`` payload of a ``make new note`` command."""

    def __init__(self, config: Optional[FormatConfig] = None):
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> FormatConfig:
        return self._config

    def wrap(self, markup: str) -> str:
        cfg = self._config
        if markup.startswith(cfg.envelope_open) and markup.endswith(
            cfg.envelope_close
        ):
            return markup
        return f"{cfg.envelope_open}{markup}{cfg.envelope_close}"

    def format(self, raw: Optional[str]) -> str:
        if not raw:
            return ""
        try:
            return self._format(raw)
        except Exception:
            LOGGER.exception("notes.format.failed type=%s", type(raw).__name__)
            return self._fallback(raw)

    def _format(self, raw: str) -> str:
        text = raw.replace("\r\n", "\n").replace("\r", "\n")
        escaped = escape_for_literal(text)

        if not has_markup(escaped):
            LOGGER.debug("notes.format.plain len=%d", len(escaped))
            return self.wrap(escaped.replace("\n", "<br>"))

        body = normalize_list_whitespace(escaped)
        if has_nested_list(body):
            body = flatten_nested_lists(body, self._config, literal_escaped=True)
            LOGGER.debug("notes.format.flattened len=%d", len(body))
        body = convert_line_breaks(body)
        return self.wrap(body)

    def _fallback(self, raw: str) -> str:
        try:
            escaped = escape_for_literal(raw.replace("\r\n", "\n"))
            return self.wrap(escaped.replace("\n", "<br>"))
        except Exception:
            LOGGER.exception("notes.format.fallback_failed")
            return ""


_DEFAULT_FORMATTER = ContentFormatter()


def format_note_content(raw: Optional[str], config: Optional[FormatConfig] = None) -> str:
    """Format ``raw`` with the default (or given) config."""
    if config is None:
        return _DEFAULT_FORMATTER.format(raw)
    return ContentFormatter(config).format(raw)


__all__ = [
    "ContentFormatter",
    "convert_line_breaks",
    "format_note_content",
    "has_markup",
    "normalize_list_whitespace",
]
