"""
High-level Notes service.

Public API:
  - NotesService.account_name -> Optional[str]
  - NotesService.create_note(title, content, tags=()) -> Optional[Note]
  - NotesService.search_notes(query) -> List[Note]
  - NotesService.get_note_content(title) -> str
  - NotesService.build_script(command) -> str

Every operation builds one AppleScript, hands it to the configured runner and
maps the result. Failures are logged and reported as None / [] / "".
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .domain import Note, ScriptResult, generate_note_id
from .formatting import ContentFormatter, escape_for_literal
from .scripting import OsaScriptRunner, ScriptRunner
from .settings import NotesSettings

LOGGER = logging.getLogger(__name__)

_UNSET = object()

_CONTROL_ESCAPES = (("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t"))


def _script_string(text: str) -> str:
    """Escape a single-line value (title, query) for an AppleScript literal."""
    out = escape_for_literal(text)
    for needle, replacement in _CONTROL_ESCAPES:
        out = out.replace(needle, replacement)
    return out


class NotesService:
    """Talks to Notes.app, preferring the configured account when available."""

    _APP = "Notes"

    def __init__(
        self,
        runner: Optional[ScriptRunner] = None,
        settings: Optional[NotesSettings] = None,
        formatter: Optional[ContentFormatter] = None,
    ):
        self.settings = settings or NotesSettings.from_env()
        self._runner: ScriptRunner = runner or OsaScriptRunner(
            timeout=self.settings.timeout, osascript=self.settings.osascript
        )
        self._formatter = formatter or ContentFormatter()
        self._account: object = _UNSET

    # ------------------------------ Account ----------------------------------

    def detect_account(self) -> Optional[str]:
        """Return the preferred account if Notes can address it, else None."""
        preferred = self.settings.account
        if not preferred:
            return None
        probe = "\n".join(
            [
                f'tell application "{self._APP}"',
                f'  tell account "{escape_for_literal(preferred)}"',
                '    return "OK"',
                "  end tell",
                "end tell",
            ]
        )
        result = self._runner(probe)
        if result.success:
            LOGGER.info("Using %s account", preferred)
            return preferred
        LOGGER.warning("%s account not available, using default account", preferred)
        return None

    @property
    def account_name(self) -> Optional[str]:
        if self._account is _UNSET:
            self._account = self.detect_account()
        return self._account  # type: ignore[return-value]

    def build_script(self, command: str) -> str:
        account = self.account_name
        if account:
            return "\n".join(
                [
                    f'tell application "{self._APP}"',
                    f'  tell account "{escape_for_literal(account)}"',
                    f"    {command}",
                    "  end tell",
                    "end tell",
                ]
            )
        return "\n".join([f'tell application "{self._APP}"', f"  {command}", "end tell"])

    def _run(self, command: str) -> ScriptResult:
        return self._runner(self.build_script(command))

    # ------------------------------ Operations -------------------------------

    def create_note(
        self, title: str, content: str, tags: Iterable[str] = ()
    ) -> Optional[Note]:
        body = self._formatter.format(content)
        command = (
            "make new note with properties "
            f'{{name:"{_script_string(title)}", body:"{body}"}}'
        )
        result = self._run(command)
        if not result.success:
            LOGGER.error("Failed to create note: %s", result.error)
            return None
        return Note(
            id=generate_note_id(),
            title=title,
            content=content,
            tags=tuple(tags or ()),
        )

    def search_notes(self, query: str) -> List[Note]:
        command = f'get name of notes where name contains "{_script_string(query)}"'
        result = self._run(command)
        if not result.success:
            LOGGER.error("Failed to search notes: %s", result.error)
            return []
        # osascript renders lists as "a, b, c"
        titles = [t.strip() for t in result.output.split(", ")]
        return [Note(id=generate_note_id(), title=t) for t in titles if t]

    def get_note_content(self, title: str) -> str:
        command = f'get body of note "{_script_string(title)}"'
        result = self._run(command)
        if not result.success:
            LOGGER.error("Failed to get note content: %s", result.error)
            return ""
        return result.output
