from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "forbid") -> str:
    """
    Determine the extra-mode from environment vars.

    APPLENOTES_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> ignore
    """
    raw = (os.getenv("APPLENOTES_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "ignore"

    return default


_EXTRA = _env_extra_mode()


class NotesModel(BaseModel):
    """
    Project-wide base model for tool parameters.

    Unknown fields are rejected by default; relax at runtime by setting an env
    var before import:
      export APPLENOTES_EXTRA=ignore   # or allow/forbid
    """

    model_config = ConfigDict(
        extra=_EXTRA,
        str_strip_whitespace=False,
        frozen=True,
    )


__all__ = ["NotesModel", "_env_extra_mode"]
