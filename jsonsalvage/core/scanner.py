"""
String-aware scanning shared by the extraction and repair steps.

Braces, brackets and commas inside a JSON string literal are data, not
structure. The helpers here walk text while tracking double-quoted string
state so the repair steps only ever touch structural characters.
"""

from collections.abc import Generator
from dataclasses import dataclass, field

OPENERS = "{["
CLOSERS = "}]"
CLOSER_FOR = {"{": "}", "[": "]"}
OPENER_FOR = {"}": "{", "]": "["}


class StringStateTracker:
    """Helper class to track string state during text processing."""

    def __init__(self) -> None:
        self.in_string = False
        self.escape_next = False

    def update_state(self, char: str) -> bool:
        """
        Update string state with the next character.

        Args:
            char: Character being consumed

        Returns:
            True if the character is part of a string literal (quotes included)
        """
        if self.escape_next:
            self.escape_next = False
            return True

        if self.in_string:
            if char == "\\":
                self.escape_next = True
            elif char == '"':
                self.in_string = False
            return True

        if char == '"':
            self.in_string = True
            return True

        return False


def iterate_structural(
    text: str, start: int = 0
) -> Generator[tuple[int, str], None, None]:
    """
    Iterate over the characters of text that sit outside string literals.

    Yields:
        Tuple of (index, character)
    """
    tracker = StringStateTracker()

    for i in range(start, len(text)):
        char = text[i]
        if not tracker.update_state(char):
            yield i, char


def find_first_opener(text: str, openers: str = OPENERS) -> int:
    """Index of the first structural opener in openers, or -1."""
    for i, char in iterate_structural(text):
        if char in openers:
            return i
    return -1


def find_structure_end(text: str, start: int) -> int:
    """
    Find where the structure opened at start is closed.

    Closers that do not match the innermost open structure are ignored.

    Returns:
        Index of the matching closer, or -1 if the structure never closes
    """
    stack: list[str] = []

    for i, char in iterate_structural(text, start):
        if char in OPENERS:
            stack.append(char)
        elif char in CLOSERS and stack and stack[-1] == OPENER_FOR[char]:
            stack.pop()
            if not stack:
                return i

    return -1


@dataclass
class StructureScan:
    """Open structures left at the end of a scan."""

    unclosed: list[str] = field(default_factory=list)  # Outermost first
    ends_in_string: bool = False

    @property
    def closing_sequence(self) -> str:
        """Closers needed to close every open structure, innermost first."""
        return "".join(CLOSER_FOR[opener] for opener in reversed(self.unclosed))


def scan_structure(text: str) -> StructureScan:
    """Scan text and report which structures are still open at its end."""
    tracker = StringStateTracker()
    stack: list[str] = []

    for char in text:
        if tracker.update_state(char):
            continue

        if char in OPENERS:
            stack.append(char)
        elif char in CLOSERS and stack and stack[-1] == OPENER_FOR[char]:
            stack.pop()

    return StructureScan(unclosed=stack, ends_in_string=tracker.in_string)
