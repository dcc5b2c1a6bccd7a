"""
Test cases for the repair pipeline.

Tests focus on step ordering, configuration gating and repair bookkeeping.
"""

import unittest

from jsonsalvage.core.results import RepairAction
from jsonsalvage.preprocessing import (
    BracketBalancer,
    ControlCharacterStripper,
    FenceStripper,
    RepairPipeline,
    RepairStepBase,
    SpanExtractor,
    TrailingCommaRemover,
)
from jsonsalvage.utils.config import RecoveryConfig


class UppercaseStep(RepairStepBase):
    """Test step without a repair action."""

    def process(self, text, _config):
        return text.upper()


class TestRepairPipeline(unittest.TestCase):
    """Test pipeline composition."""

    def test_default_pipeline_order(self):
        """Test that extraction runs before repairs and balancing comes last."""
        steps = [type(step) for step in RepairPipeline.create_default_pipeline().steps]
        self.assertEqual(
            steps,
            [
                FenceStripper,
                SpanExtractor,
                TrailingCommaRemover,
                ControlCharacterStripper,
                BracketBalancer,
                TrailingCommaRemover,
            ],
        )

    def test_repair_pipeline_has_no_extraction(self):
        """Test that the repair-only pipeline leaves prose alone."""
        pipeline = RepairPipeline.create_repair_pipeline()
        self.assertEqual(pipeline.process('note {"a": 1}'), 'note {"a": 1}')

    def test_records_applied_actions_in_order(self):
        """Test that each step that changed the text is recorded once."""
        applied = []
        result = RepairPipeline.create_default_pipeline().process(
            'Here:\n```json\n{"a": [1, 2,\x00', RecoveryConfig(), applied
        )
        self.assertEqual(result, '{"a": [1, 2]}')
        self.assertEqual(
            applied,
            [
                RepairAction.FENCES_STRIPPED,
                RepairAction.SPAN_EXTRACTED,
                RepairAction.CONTROL_CHARACTERS_REMOVED,
                RepairAction.BRACKETS_CLOSED,
                RepairAction.TRAILING_COMMAS_REMOVED,
            ],
        )

    def test_unchanged_text_records_nothing(self):
        """Test that steps which change nothing are not recorded."""
        applied = []
        RepairPipeline.create_default_pipeline().process('{"a": 1}', RecoveryConfig(), applied)
        self.assertEqual(applied, [])

    def test_disabled_steps_skipped(self):
        """Test that configuration switches steps off."""
        config = RecoveryConfig.from_features({"remove_trailing_commas"})
        result = RepairPipeline.create_default_pipeline().process(
            'text {"a": 1,}', config
        )
        self.assertEqual(result, 'text {"a": 1}')

    def test_custom_step_without_action(self):
        """Test that steps without an action still run but are not recorded."""
        applied = []
        pipeline = RepairPipeline()
        pipeline.add_step(UppercaseStep())
        self.assertEqual(pipeline.process("abc", None, applied), "ABC")
        self.assertEqual(applied, [])

    def test_empty_pipeline(self):
        """Test that an empty pipeline is the identity."""
        self.assertEqual(RepairPipeline().process("anything"), "anything")

    def test_base_step_requires_process(self):
        """Test that the base class cannot be used directly."""
        with self.assertRaises(NotImplementedError):
            RepairStepBase().process("x", RecoveryConfig())


if __name__ == "__main__":
    unittest.main()
