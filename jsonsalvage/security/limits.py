"""
Security limits and validation for jsonsalvage.
This module bounds the work done on oversized or pathologically nested input.
"""

from ..utils.config import RecoveryLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates recovery limits to prevent resource exhaustion."""

    def __init__(self, limits: RecoveryLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def validate_nesting_depth(self, depth: int) -> None:
        """Validate the depth of structures that are about to be closed."""
        if depth > self.limits.max_nesting_depth:
            raise SecurityError(
                f"Nesting depth {depth} exceeds limit "
                f"{self.limits.max_nesting_depth}"
            )
