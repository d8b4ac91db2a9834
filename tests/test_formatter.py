"""Tests for the note body formatting pipeline."""

import time
import unittest
from unittest.mock import patch

from applenotes.services.notes.formatting import (
    ContentFormatter,
    FormatConfig,
    format_note_content,
)
from applenotes.services.notes.formatting.formatter import (
    convert_line_breaks,
    has_markup,
    normalize_list_whitespace,
)

NBSP4 = "&nbsp;" * 4

NESTED_SOURCE = (
    "<ol>\n"
    "<li>Intro</li>\n"
    "<li>Steps\n"
    "<ul>\n"
    "<li>First</li>\n"
    "<li>Second</li>\n"
    "</ul>\n"
    "</li>\n"
    "</ol>"
)

NESTED_EXPECTED = (
    "<html><body>"
    "<div><b>1. Intro</b></div>"
    "<div><b><span style='color:#1D6FD8'>2. Steps</span></b></div>"
    f"<div>{NBSP4}• First</div>"
    f"<div>{NBSP4}• Second</div>"
    "<div><br></div>"
    "</body></html>"
)


class PlainTextFormatTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(format_note_content(""), "")
        self.assertEqual(format_note_content(None), "")

    def test_line_breaks(self):
        self.assertEqual(
            format_note_content("line1\nline2"),
            "<html><body>line1<br>line2</body></html>",
        )

    def test_carriage_returns_normalized(self):
        self.assertEqual(
            format_note_content("a\r\nb\rc"), "<html><body>a<br>b<br>c</body></html>"
        )

    def test_quotes_and_backslashes_escaped_for_literal(self):
        self.assertEqual(
            format_note_content('say "hi" \\ bye'),
            '<html><body>say \\"hi\\" \\\\ bye</body></html>',
        )

    def test_angle_bracket_without_tag_is_plain_text(self):
        self.assertFalse(has_markup("a < b\nc > d"))
        self.assertEqual(
            format_note_content("a < b\nc"), "<html><body>a < b<br>c</body></html>"
        )


class MarkupFormatTest(unittest.TestCase):
    def test_single_level_list_kept(self):
        out = format_note_content("<ul>\n  <li>One</li>\n  <li>Two</li>\n</ul>")
        self.assertEqual(out, "<html><body><ul><li>One</li><li>Two</li></ul></body></html>")
        self.assertEqual(out.count("<li>"), 2)
        self.assertEqual(out.count("</li>"), 2)

    def test_line_breaks_inside_markup(self):
        self.assertEqual(
            format_note_content("<p>a\nb</p>"), "<html><body><p>a<br>b</p></body></html>"
        )

    def test_newline_inside_tag_untouched(self):
        out = format_note_content('<a href="x"\ntitle="y">link</a>\nnext')
        self.assertEqual(
            out,
            '<html><body><a href=\\"x\\"\ntitle=\\"y\\">link</a><br>next</body></html>',
        )

    def test_nested_list_flattened(self):
        self.assertEqual(format_note_content(NESTED_SOURCE), NESTED_EXPECTED)

    def test_nested_list_text_escaped_once(self):
        out = format_note_content("<ol><li>Say \"hi\"<ul><li>it's \\ fine</li></ul></li></ol>")
        self.assertIn("1. Say “hi”", out)
        self.assertIn(f"{NBSP4}• it&#39;s \\\\ fine", out)
        self.assertNotIn('"', out)
        self.assertNotIn('\\"', out)

    def test_malformed_list_terminates(self):
        out = format_note_content("<ol><li>one</li><li>two<ul><li>x</li></ul></ol>")
        self.assertTrue(out.startswith("<html><body><div><b>1. one</b></div>"))
        self.assertIn("<ol start='2'>", out)
        self.assertTrue(out.endswith("</body></html>"))

    def test_custom_config(self):
        out = format_note_content(NESTED_SOURCE, FormatConfig(bullet="◦", indent_width=1))
        self.assertIn("<div>&nbsp;◦ First</div>", out)


class IdempotenceTest(unittest.TestCase):
    def test_format_twice_is_stable(self):
        once = format_note_content(NESTED_SOURCE)
        self.assertEqual(format_note_content(once), once)

    def test_plain_text_twice_is_stable(self):
        once = format_note_content("line1\nline2\nline3")
        self.assertEqual(format_note_content(once), once)

    def test_line_break_step_is_noop_on_output(self):
        once = format_note_content("<p>a\nb</p>\n<p>c</p>")
        self.assertEqual(convert_line_breaks(once), once)

    def test_envelope_not_doubled(self):
        formatter = ContentFormatter()
        wrapped = formatter.wrap("x")
        self.assertEqual(formatter.wrap(wrapped), wrapped)


class NormalizeListWhitespaceTest(unittest.TestCase):
    def test_strips_breaks_at_list_boundaries(self):
        self.assertEqual(
            normalize_list_whitespace("<ol>\n  <li>\n a\n</li>\n<li>b</li>\n</ol>"),
            "<ol><li>a</li><li>b</li></ol>",
        )

    def test_keeps_breaks_outside_lists(self):
        self.assertEqual(
            normalize_list_whitespace("<p>a</p>\n<p>b</p>"), "<p>a</p>\n<p>b</p>"
        )
        self.assertEqual(normalize_list_whitespace("</ul>\nx"), "</ul>\nx")

    def test_keeps_spaces_without_line_break(self):
        self.assertEqual(
            normalize_list_whitespace("<ul> <li>a </li></ul>"), "<ul> <li>a </li></ul>"
        )

    def test_long_whitespace_runs_are_linear(self):
        markup = "<ul><li>a</li></ul>" + " \n" * 20000 + "x"
        start = time.perf_counter()
        out = format_note_content(markup)
        elapsed = time.perf_counter() - start

        self.assertLess(elapsed, 2.0)
        self.assertTrue(out.endswith(" <br>" * 20000 + "x</body></html>"))

    def test_long_run_before_closing_tag(self):
        markup = "<ul><li>a" + " \n" * 20000 + "</li></ul>"
        start = time.perf_counter()
        out = normalize_list_whitespace(markup)
        elapsed = time.perf_counter() - start

        self.assertLess(elapsed, 2.0)
        self.assertEqual(out, "<ul><li>a</li></ul>")


class FailurePolicyTest(unittest.TestCase):
    def test_never_raises(self):
        with patch(
            "applenotes.services.notes.formatting.formatter.flatten_nested_lists",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertLogs(
                "applenotes.services.notes.formatting.formatter", level="ERROR"
            ):
                out = format_note_content("<ol><li>a<ul><li>b</li></ul></li></ol>\nx")
        self.assertEqual(
            out, "<html><body><ol><li>a<ul><li>b</li></ul></li></ol><br>x</body></html>"
        )

    def test_non_text_input_does_not_raise(self):
        with self.assertLogs(
            "applenotes.services.notes.formatting.formatter", level="ERROR"
        ):
            out = ContentFormatter().format(42)  # type: ignore[arg-type]
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
