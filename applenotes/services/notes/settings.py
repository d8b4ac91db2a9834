"""
Runtime settings for talking to Notes.app.

All fields have defaults; ``NotesSettings.from_env()`` applies environment
overrides:
  APPLENOTES_ACCOUNT    preferred account name ("iCloud"); empty -> default account
  APPLENOTES_TIMEOUT    osascript timeout in seconds (10)
  APPLENOTES_OSASCRIPT  osascript binary ("osascript")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_ACCOUNT = "iCloud"
DEFAULT_TIMEOUT = 10.0


def _float_or(raw: Optional[object], default: float) -> float:
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        LOGGER.warning("Ignoring invalid timeout value: %r", raw)
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class NotesSettings:
    account: Optional[str] = DEFAULT_ACCOUNT
    timeout: float = DEFAULT_TIMEOUT
    osascript: str = "osascript"

    @classmethod
    def from_env(cls) -> "NotesSettings":
        account = os.getenv("APPLENOTES_ACCOUNT", DEFAULT_ACCOUNT).strip() or None
        return cls(
            account=account,
            timeout=_float_or(os.getenv("APPLENOTES_TIMEOUT"), DEFAULT_TIMEOUT),
            osascript=os.getenv("APPLENOTES_OSASCRIPT") or "osascript",
        )

    def merged(self, overrides: Mapping[str, Any]) -> "NotesSettings":
        """Return a copy with values from a config mapping (e.g. config.json)."""
        changes = {}
        if "account" in overrides:
            changes["account"] = (str(overrides["account"] or "").strip()) or None
        if "timeout" in overrides:
            changes["timeout"] = _float_or(overrides["timeout"], self.timeout)
        if overrides.get("osascript"):
            changes["osascript"] = str(overrides["osascript"])
        return replace(self, **changes) if changes else self
