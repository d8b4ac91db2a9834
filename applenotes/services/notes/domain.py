# applenotes/services/notes/domain.py
from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

_BASE36 = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class ScriptResult:
    success: bool
    output: str = ""
    error: Optional[str] = None


@dataclass(frozen=True)
class Note:
    """A note as seen by the tool layer. Tags are informational only."""

    id: str
    title: str
    content: str = ""
    tags: Tuple[str, ...] = ()
    created: datetime = field(default_factory=datetime.now)
    modified: datetime = field(default_factory=datetime.now)


def generate_note_id() -> str:
    """``<epoch millis>-<9 base36 chars>``; Notes does not hand back an id."""
    suffix = "".join(random.choice(_BASE36) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"
