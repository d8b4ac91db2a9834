"""Tests for the Notes service."""

import re
import unittest
from unittest.mock import MagicMock

from applenotes.services.notes import NotesService, NotesSettings, ScriptResult

OK = ScriptResult(success=True, output="OK")
FAILED = ScriptResult(success=False, output="", error="AppleScript failed")


def _service(runner, account=None):
    return NotesService(runner=runner, settings=NotesSettings(account=account))


class AccountDetectionTest(unittest.TestCase):
    def test_uses_preferred_account_when_available(self):
        runner = MagicMock(return_value=OK)
        service = _service(runner, account="iCloud")

        self.assertEqual(service.account_name, "iCloud")
        self.assertEqual(service.account_name, "iCloud")
        runner.assert_called_once()
        self.assertIn('tell account "iCloud"', runner.call_args.args[0])

    def test_falls_back_to_default_account(self):
        runner = MagicMock(return_value=FAILED)
        service = _service(runner, account="iCloud")

        with self.assertLogs("applenotes.services.notes.service", level="WARNING"):
            self.assertIsNone(service.account_name)
        self.assertEqual(
            service.build_script("return 1"),
            'tell application "Notes"\n  return 1\nend tell',
        )

    def test_no_probe_without_preferred_account(self):
        runner = MagicMock(return_value=OK)
        service = _service(runner)

        self.assertIsNone(service.account_name)
        runner.assert_not_called()

    def test_script_with_account(self):
        service = _service(MagicMock(return_value=OK), account="iCloud")
        self.assertEqual(
            service.build_script("return 1"),
            'tell application "Notes"\n'
            '  tell account "iCloud"\n'
            "    return 1\n"
            "  end tell\n"
            "end tell",
        )


class CreateNoteTest(unittest.TestCase):
    def setUp(self):
        self.runner = MagicMock(return_value=ScriptResult(success=True, output="note123"))
        self.service = _service(self.runner)

    def test_simple_note(self):
        note = self.service.create_note("Test Title", "Test Content", ["a", "b"])

        self.assertIsNotNone(note)
        self.assertEqual(note.title, "Test Title")
        self.assertEqual(note.content, "Test Content")
        self.assertEqual(note.tags, ("a", "b"))
        self.assertRegex(note.id, r"^\d+-[0-9a-z]{9}$")
        self.assertEqual(
            self.runner.call_args.args[0],
            'tell application "Notes"\n'
            '  make new note with properties {name:"Test Title", '
            'body:"<html><body>Test Content</body></html>"}\n'
            "end tell",
        )

    def test_html_content_quotes_escaped(self):
        self.service.create_note("HTML Note", '<script>alert("xss")</script>')

        script = self.runner.call_args.args[0]
        self.assertIn("<html><body>", script)
        self.assertIn("</body></html>", script)
        self.assertIn('alert(\\"xss\\")', script)

    def test_line_breaks_preserved(self):
        self.service.create_note("Multi-line Note", "Line 1\nLine 2\nLine 3")

        self.assertIn("Line 1<br>Line 2<br>Line 3", self.runner.call_args.args[0])

    def test_title_escaped(self):
        self.service.create_note('My "quoted" \\ title', "x")

        self.assertIn('name:"My \\"quoted\\" \\\\ title"', self.runner.call_args.args[0])

    def test_title_control_characters_escaped(self):
        self.service.create_note("Line one\nLine\ttwo\r", "x")

        script = self.runner.call_args.args[0]
        self.assertIn('name:"Line one\\nLine\\ttwo\\r"', script)
        self.assertEqual(len(script.splitlines()), 3)

    def test_body_never_breaks_the_literal(self):
        self.service.create_note(
            "Nested", '<ol><li>Say "hi"<ul><li>one</li><li>two</li></ul></li></ol>'
        )
        script = self.runner.call_args.args[0]
        body = script.split('body:"', 1)[1].rsplit('"}', 1)[0]
        self.assertNotRegex(body, r'(?<!\\)"')
        self.assertIn("• one", body)

    def test_failure_returns_none(self):
        self.runner.return_value = FAILED
        with self.assertLogs("applenotes.services.notes.service", level="ERROR"):
            self.assertIsNone(self.service.create_note("Test", "Content"))


class SearchAndGetTest(unittest.TestCase):
    def test_search_returns_titles(self):
        runner = MagicMock(
            return_value=ScriptResult(success=True, output="Note 1, Note 2, Note 3")
        )
        notes = _service(runner).search_notes('te"st')

        self.assertEqual([n.title for n in notes], ["Note 1", "Note 2", "Note 3"])
        script = runner.call_args.args[0]
        self.assertIn('where name contains "te\\"st"', script)

    def test_search_query_stays_on_one_line(self):
        runner = MagicMock(return_value=ScriptResult(success=True, output=""))
        _service(runner).search_notes("a\nb")

        self.assertIn('contains "a\\nb"', runner.call_args.args[0])

    def test_get_note_content_title_escaped(self):
        runner = MagicMock(return_value=ScriptResult(success=True, output="x"))
        _service(runner).get_note_content("a\tb")

        self.assertIn('get body of note "a\\tb"', runner.call_args.args[0])

    def test_search_no_matches(self):
        runner = MagicMock(return_value=ScriptResult(success=True, output=""))
        self.assertEqual(_service(runner).search_notes("nonexistent"), [])

    def test_search_failure(self):
        runner = MagicMock(return_value=FAILED)
        with self.assertLogs("applenotes.services.notes.service", level="ERROR"):
            self.assertEqual(_service(runner).search_notes("test"), [])

    def test_get_note_content(self):
        runner = MagicMock(
            return_value=ScriptResult(success=True, output="Note content here")
        )
        self.assertEqual(_service(runner).get_note_content("Test Note"), "Note content here")
        self.assertTrue(
            re.search(r'get body of note "Test Note"', runner.call_args.args[0])
        )

    def test_get_missing_note(self):
        runner = MagicMock(return_value=FAILED)
        with self.assertLogs("applenotes.services.notes.service", level="ERROR"):
            self.assertEqual(_service(runner).get_note_content("Nonexistent"), "")


if __name__ == "__main__":
    unittest.main()
