"""
Test cases for content extraction steps.

Tests focus on pulling the JSON payload out of fences and prose without
touching the payload itself.
"""

import unittest

from jsonsalvage.preprocessing.extractors import FenceStripper, SpanExtractor, greedy_spans
from jsonsalvage.utils.config import ExtractionSettings, RecoveryConfig, Shape


class TestFenceStripper(unittest.TestCase):
    """Test markdown code fence removal."""

    def test_json_fence(self):
        """Test removing a ```json fence pair."""
        text = '```json\n{"a": 1}\n```'
        self.assertEqual(FenceStripper.strip_fences(text), '{"a": 1}')

    def test_bare_fence(self):
        """Test removing a fence pair without a language tag."""
        self.assertEqual(FenceStripper.strip_fences("```\n[1, 2]\n```"), "[1, 2]")

    def test_uppercase_language_tag(self):
        """Test that the language tag is matched case-insensitively."""
        self.assertEqual(FenceStripper.strip_fences('```JSON\n{"a": 1}```'), '{"a": 1}')

    def test_fence_in_middle_of_text(self):
        """Test that fences are removed regardless of position."""
        text = 'Here is the report:\n```json\n{"a": 1}\n```\nEnjoy!'
        self.assertEqual(
            FenceStripper.strip_fences(text), 'Here is the report:\n\n{"a": 1}\n\nEnjoy!'
        )

    def test_unclosed_fence(self):
        """Test that a fence left open by truncation is still removed."""
        self.assertEqual(FenceStripper.strip_fences('```json\n{"a": [1'), '{"a": [1')

    def test_no_fence_unchanged(self):
        """Test that text without fences is returned as is."""
        text = '  {"a": 1}  '
        self.assertIs(FenceStripper.strip_fences(text), text)

    def test_should_apply_follows_config(self):
        """Test that the step can be switched off."""
        config = RecoveryConfig(extraction=ExtractionSettings(strip_code_fences=False))
        self.assertFalse(FenceStripper().should_apply(config))
        self.assertTrue(FenceStripper().should_apply(RecoveryConfig()))


class TestSpanExtractor(unittest.TestCase):
    """Test isolation of the JSON span."""

    def test_prose_around_object(self):
        """Test discarding leading and trailing prose."""
        text = 'Sure! Here you go: {"a": 1} Hope that helps! 😊'
        self.assertEqual(SpanExtractor.extract_span(text), '{"a": 1}')

    def test_array_first(self):
        """Test that an array wins when its bracket comes first."""
        text = 'Participants: [{"id": 1}, {"id": 2}] done'
        self.assertEqual(SpanExtractor.extract_span(text), '[{"id": 1}, {"id": 2}]')

    def test_greedy_to_last_closer(self):
        """Test that the span runs to the last closer, not the first match."""
        text = '{"a": 1} and also {"b": 2} bye'
        self.assertEqual(SpanExtractor.extract_span(text), '{"a": 1} and also {"b": 2}')

    def test_truncated_span_runs_to_end(self):
        """Test that a never-closed structure keeps everything after the opener."""
        text = 'Result: {"a": [1, 2, 3'
        self.assertEqual(SpanExtractor.extract_span(text), '{"a": [1, 2, 3')

    def test_truncated_span_ignores_earlier_inner_closers(self):
        """Test that closers of inner structures do not cut a truncated span."""
        text = 'Result: {"a": {"b": 1}, "c": [1, 2'
        self.assertEqual(
            SpanExtractor.extract_span(text), '{"a": {"b": 1}, "c": [1, 2'
        )

    def test_braces_in_leading_quoted_prose_ignored(self):
        """Test that braces inside quoted prose are not taken as the start."""
        text = 'You asked for "{x}" so: {"x": 1}'
        self.assertEqual(SpanExtractor.extract_span(text), '{"x": 1}')

    def test_expect_object_skips_leading_array(self):
        """Test that an expected shape selects its own delimiter."""
        text = 'Notes [draft] {"a": 1}'
        self.assertEqual(SpanExtractor.extract_span(text, Shape.OBJECT), '{"a": 1}')

    def test_expect_array(self):
        """Test extracting an array when an object appears first."""
        text = '{"meta": 1} [1, 2]'
        self.assertEqual(SpanExtractor.extract_span(text, Shape.ARRAY), "[1, 2]")

    def test_no_json_unchanged(self):
        """Test that text without delimiters is returned unchanged."""
        self.assertEqual(SpanExtractor.extract_span("I cannot help."), "I cannot help.")

    def test_process_uses_config_shape(self):
        """Test that process() honours config.expect."""
        config = RecoveryConfig(expect=Shape.ARRAY)
        self.assertEqual(SpanExtractor().process('{"a": [1]}', config), "[1]")


class TestGreedySpans(unittest.TestCase):
    """Test naive fallback spans."""

    def test_both_shapes_ordered_by_position(self):
        """Test that candidates follow the position of their opener."""
        text = 'x [1] {"a": 2} y'
        self.assertEqual(greedy_spans(text), ["[1]", '{"a": 2}'])

    def test_skips_openers_inside_earlier_span(self):
        """Test that a nested array is not offered as its own candidate."""
        text = '{"tags": ["a"], "q": "x "y" z"}'
        self.assertEqual(greedy_spans(text), [text])

    def test_ignores_string_state(self):
        """Test that unbalanced quotes in prose do not hide the payload."""
        text = 'The 5" screen report: {"size": 5}'
        self.assertEqual(greedy_spans(text), ['{"size": 5}'])

    def test_unclosed_runs_to_end(self):
        """Test that a missing closer keeps the rest of the text."""
        self.assertEqual(greedy_spans('go {"a": 1'), ['{"a": 1'])

    def test_expected_shape_only(self):
        """Test that an expected shape limits the candidates."""
        self.assertEqual(greedy_spans('[1] {"a": 2}', Shape.OBJECT), ['{"a": 2}'])

    def test_no_candidates(self):
        """Test text without any opener."""
        self.assertEqual(greedy_spans("nothing"), [])


if __name__ == "__main__":
    unittest.main()
