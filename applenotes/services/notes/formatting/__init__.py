"""Note body formatting for Apple Notes, transport-agnostic.

Contains:
- escaping: AppleScript literal / HTML entity / combined escaping contexts
- lists: nested list detection and flattening
- formatter: the ordered pipeline producing the final ``body`` payload
- options: presentation settings for flattened blocks and the envelope
"""

from .escaping import (
    EscapeContext,
    escape,
    escape_for_literal,
    escape_for_literal_embedded_markup,
    escape_for_markup_entities,
)
from .formatter import ContentFormatter, format_note_content
from .lists import flatten_nested_lists, has_nested_list
from .options import FormatConfig

__all__ = [
    "ContentFormatter",
    "EscapeContext",
    "FormatConfig",
    "escape",
    "escape_for_literal",
    "escape_for_literal_embedded_markup",
    "escape_for_markup_entities",
    "flatten_nested_lists",
    "format_note_content",
    "has_nested_list",
]
