"""
Repair pipeline for composable completion repair steps.

This module implements the pipeline pattern to allow flexible composition
of extraction and repair steps based on configuration.
"""

from typing import Optional

from ..core.results import RepairAction
from ..utils.config import RecoveryConfig
from .base import RepairStepBase
from .extractors import FenceStripper, SpanExtractor
from .repairers import BracketBalancer, ControlCharacterStripper, TrailingCommaRemover


class RepairPipeline:
    """Manages a sequence of repair steps applied to a completion."""

    def __init__(self, steps: Optional[list[RepairStepBase]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStepBase) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    def process(
        self,
        text: str,
        config: Optional[RecoveryConfig] = None,
        applied: Optional[list[RepairAction]] = None,
    ) -> str:
        """
        Apply all applicable steps to the text.

        Args:
            text: Text to repair
            config: Recovery configuration, defaults to RecoveryConfig()
            applied: If given, receives the action of every step that changed
                the text, in order and without duplicates

        Returns:
            The repaired text
        """
        if config is None:
            config = RecoveryConfig()
        logger = config.get_logger()

        result = text
        for step in self.steps:
            if not step.should_apply(config):
                continue

            processed = step.process(result, config)
            if processed != result:
                logger.debug(
                    f"{type(step).__name__} changed completion "
                    f"({len(result)} -> {len(processed)} chars)"
                )
                if (
                    applied is not None
                    and step.action is not None
                    and step.action not in applied
                ):
                    applied.append(step.action)
            result = processed
        return result

    @classmethod
    def create_default_pipeline(cls) -> "RepairPipeline":
        """Create the full pipeline: extract the payload, then repair it."""
        pipeline = cls()

        # Content extraction steps
        pipeline.add_step(FenceStripper())
        pipeline.add_step(SpanExtractor())

        # Syntax repair steps
        for step in cls.create_repair_pipeline().steps:
            pipeline.add_step(step)

        return pipeline

    @classmethod
    def create_repair_pipeline(cls) -> "RepairPipeline":
        """Create a pipeline of syntax repairs only, for already isolated spans."""
        pipeline = cls()
        pipeline.add_step(TrailingCommaRemover())
        pipeline.add_step(ControlCharacterStripper())
        pipeline.add_step(BracketBalancer())

        # Closing a truncated structure can expose a comma before the new closer
        pipeline.add_step(TrailingCommaRemover())

        return pipeline
