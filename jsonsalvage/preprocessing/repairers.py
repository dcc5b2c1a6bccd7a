"""
Syntax repair steps.

This module contains the steps that turn an isolated but malformed payload
into strict JSON: trailing comma removal, control character stripping and
closing of structures left open by truncated output.
"""

import re

from ..core.results import RepairAction
from ..core.scanner import CLOSERS, StringStateTracker, scan_structure
from ..security.limits import LimitValidator
from ..utils.config import RecoveryConfig
from .base import RepairStepBase

# C0 controls and DEL, minus tab, newline and carriage return
CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


class TrailingCommaRemover(RepairStepBase):
    """Removes commas that directly precede a closing brace or bracket."""

    action = RepairAction.TRAILING_COMMAS_REMOVED

    def should_apply(self, config: RecoveryConfig) -> bool:
        """Apply if trailing comma removal is enabled."""
        return config.remove_trailing_commas

    def process(self, text: str, config: RecoveryConfig) -> str:
        """Remove trailing commas outside string literals."""
        return self.remove_trailing_commas(text)

    @staticmethod
    def remove_trailing_commas(text: str) -> str:
        """Drop each structural comma followed only by whitespace and a closer."""
        if "," not in text:
            return text

        result = []
        tracker = StringStateTracker()

        for i, char in enumerate(text):
            if tracker.update_state(char) or char != ",":
                result.append(char)
                continue

            j = i + 1
            while j < len(text) and text[j].isspace():
                j += 1
            if j < len(text) and text[j] in CLOSERS:
                continue
            result.append(char)

        return "".join(result)


class ControlCharacterStripper(RepairStepBase):
    """Removes non-printable control characters, keeping formatting whitespace."""

    action = RepairAction.CONTROL_CHARACTERS_REMOVED

    def should_apply(self, config: RecoveryConfig) -> bool:
        """Apply if control character stripping is enabled."""
        return config.strip_control_characters

    def process(self, text: str, config: RecoveryConfig) -> str:
        """Strip control characters."""
        return CONTROL_CHARACTERS.sub("", text)


class BracketBalancer(RepairStepBase):
    """
    Appends the closers missing from output truncated by a length limit.

    Only ever appends: existing characters are never removed or reordered,
    and nothing is appended when every structure is already closed. A
    completion cut inside a string literal is left unparsable rather than
    having a string value invented for it.
    """

    action = RepairAction.BRACKETS_CLOSED

    def should_apply(self, config: RecoveryConfig) -> bool:
        """Apply if bracket balancing is enabled."""
        return config.balance_brackets

    def process(self, text: str, config: RecoveryConfig) -> str:
        """Close structures left open at the end of text."""
        scan = scan_structure(text)
        if not scan.unclosed:
            return text

        assert config.limits is not None
        LimitValidator(config.limits).validate_nesting_depth(len(scan.unclosed))

        config.get_logger().debug(
            f"Closing {len(scan.unclosed)} unclosed structure(s) with "
            f"{scan.closing_sequence!r}"
            + (" (input ends inside a string)" if scan.ends_in_string else "")
        )
        return text + scan.closing_sequence
