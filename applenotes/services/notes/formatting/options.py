"""
Formatting configuration for note bodies sent to Apple Notes.

Centralizes the presentation choices of the flattened list blocks and the
markup envelope so callers can tune them without touching core logic.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatConfig:
    # Color of the bold block that stands in for a numbered item which owns
    # a nested list.
    numbered_color: str = "#1D6FD8"

    # Nested items: "<indent><bullet> text"
    bullet: str = "•"
    indent_width: int = 4

    # Block element used for every flattened line
    block_tag: str = "div"

    # Envelope around the whole payload
    envelope_open: str = "<html><body>"
    envelope_close: str = "</body></html>"

    @property
    def indent(self) -> str:
        return "&nbsp;" * max(0, int(self.indent_width))

    @property
    def spacer(self) -> str:
        return f"<{self.block_tag}><br></{self.block_tag}>"

    def block(self, inner: str) -> str:
        return f"<{self.block_tag}>{inner}</{self.block_tag}>"


DEFAULT_CONFIG = FormatConfig()
