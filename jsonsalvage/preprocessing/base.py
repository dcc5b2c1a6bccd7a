"""
Base classes for repair steps.

This module contains the base class used by repair steps so they can be
composed in a RepairPipeline.
"""

from typing import Optional

from ..core.results import RepairAction
from ..utils.config import RecoveryConfig


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    action: Optional[RepairAction] = None

    def should_apply(self, _config: RecoveryConfig) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _config: RecoveryConfig) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
