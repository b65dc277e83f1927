"""Tests for rendering a LookupResult as display text.

Tests cover the no-result line, the translation section, the smart result
section, trailing spacing and order preservation.
"""

import unittest

from adapter.terminal.formatters import PlainFormatter
from domain.model.translation import LookupResult, SmartResult, TranslationSentence
from services.rendering import (
    NO_RESULT_MESSAGE,
    SMART_RESULT_HEADER,
    TRANSLATION_HEADER,
    render,
)


class TagFormatter:
    """Formatter that marks every decoration so tests can see which one was applied."""

    def red(self, text):
        return f"<red>{text}</red>"

    def cyan(self, text):
        return f"<cyan>{text}</cyan>"

    def yellow(self, text):
        return f"<yellow>{text}</yellow>"

    def underline(self, text):
        return f"<u>{text}</u>"


def _sentence(src: str, tgt: str) -> TranslationSentence:
    return TranslationSentence(source=src, target=tgt)


class TestRenderNoResult(unittest.TestCase):
    """Test the single-line no-result output."""

    def test_error_code_renders_single_red_line(self):
        result = LookupResult(error_code=1)

        output = render(result, TagFormatter())

        self.assertEqual(output, f"<red>{NO_RESULT_MESSAGE}</red>")
        self.assertEqual(len(output.split("\n")), 1)

    def test_error_code_wins_over_paragraphs(self):
        """Non-zero error code hides any paragraphs that came with it."""
        result = LookupResult(
            error_code=50,
            translate_result=[[_sentence("hello", "你好")]],
            smart_result=SmartResult(entries=["x"], result_type=1),
        )

        self.assertEqual(render(result, PlainFormatter()), NO_RESULT_MESSAGE)

    def test_missing_paragraphs_render_no_result(self):
        result = LookupResult(error_code=0, smart_result=SmartResult(entries=["x"], result_type=1))

        self.assertEqual(render(result, PlainFormatter()), NO_RESULT_MESSAGE)


class TestRenderTranslation(unittest.TestCase):
    """Test the translation section."""

    def test_single_sentence_without_smart_result(self):
        """Header, one source/target pair, then one empty trailing line."""
        result = LookupResult(error_code=0, translate_result=[[_sentence("hello", "你好")]])

        lines = render(result, TagFormatter()).split("\n")

        self.assertEqual(lines, [
            f"<cyan>{TRANSLATION_HEADER}</cyan>",
            "    <u>hello</u>",
            "    你好",
            "",
        ])

    def test_paragraph_order_is_preserved(self):
        """Paragraph 1 lines precede paragraph 2 lines."""
        result = LookupResult(error_code=0, translate_result=[
            [_sentence("first", "第一")],
            [_sentence("second", "第二")],
        ])

        lines = render(result, PlainFormatter()).split("\n")

        self.assertEqual(lines[1:5], ["    first", "    第一", "    second", "    第二"])

    def test_sentence_order_within_paragraph(self):
        result = LookupResult(error_code=0, translate_result=[
            [_sentence("b", "2"), _sentence("a", "1"), _sentence("b", "2")],
        ])

        lines = render(result, PlainFormatter()).split("\n")

        self.assertEqual(lines[1:7], ["    b", "    2", "    a", "    1", "    b", "    2"])

    def test_only_source_is_underlined(self):
        result = LookupResult(error_code=0, translate_result=[[_sentence("src", "tgt")]])

        output = render(result, TagFormatter())

        self.assertIn("<u>src</u>", output)
        self.assertNotIn("<u>tgt</u>", output)

    def test_empty_paragraph_list_renders_header_only(self):
        result = LookupResult(error_code=0, translate_result=[])

        self.assertEqual(render(result, PlainFormatter()), f"{TRANSLATION_HEADER}\n")


class TestRenderSmartResult(unittest.TestCase):
    """Test the smart result section."""

    def setUp(self):
        self.result = LookupResult(
            error_code=0,
            translate_result=[[_sentence("hello", "你好")]],
            smart_result=SmartResult(entries=["", "int. 喂；哈罗\r\n", "n. 表示问候\r\n"], result_type=1),
        )

    def test_smart_result_section(self):
        lines = render(self.result, TagFormatter()).split("\n")

        self.assertEqual(lines[3:], [
            "",
            f"<yellow>{SMART_RESULT_HEADER}</yellow>",
            "    int. 喂；哈罗    n. 表示问候",
        ])

    def test_no_trailing_empty_line_with_smart_result(self):
        output = render(self.result, PlainFormatter())
        self.assertFalse(output.endswith("\n"))

    def test_result_type_is_not_branched_on(self):
        """Different result types render identically."""
        other = self.result.model_copy(update={
            "smart_result": self.result.smart_result.model_copy(update={"result_type": 2}),
        })
        self.assertEqual(render(self.result, PlainFormatter()), render(other, PlainFormatter()))

    def test_empty_entries_render_empty_line(self):
        result = self.result.model_copy(update={
            "smart_result": SmartResult(entries=[], result_type=1),
        })

        lines = render(result, PlainFormatter()).split("\n")

        self.assertEqual(lines[-2], SMART_RESULT_HEADER)
        self.assertEqual(lines[-1], "    ")


if __name__ == "__main__":
    unittest.main()
