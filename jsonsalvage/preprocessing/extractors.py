"""
Content extraction steps.

This module contains the steps that locate a JSON payload inside a model
completion: markdown code fence removal and isolation of the JSON span from
surrounding prose.
"""

import re

from ..core.results import RepairAction
from ..core.scanner import CLOSER_FOR, find_first_opener, find_structure_end
from ..utils.config import RecoveryConfig, Shape
from .base import RepairStepBase

FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)


class FenceStripper(RepairStepBase):
    """Removes markdown code fence delimiters wherever they appear."""

    action = RepairAction.FENCES_STRIPPED

    def should_apply(self, config: RecoveryConfig) -> bool:
        """Apply if fence stripping is enabled."""
        return config.strip_code_fences

    def process(self, text: str, config: RecoveryConfig) -> str:
        """Strip ```json and ``` delimiters."""
        return self.strip_fences(text)

    @staticmethod
    def strip_fences(text: str) -> str:
        """Remove every code fence delimiter, keeping the fenced content."""
        if "```" not in text:
            return text
        return FENCE_PATTERN.sub("", text).strip()


class SpanExtractor(RepairStepBase):
    """Cuts the JSON document out of leading and trailing commentary."""

    action = RepairAction.SPAN_EXTRACTED

    def should_apply(self, config: RecoveryConfig) -> bool:
        """Apply if span isolation is enabled."""
        return config.isolate_json_span

    def process(self, text: str, config: RecoveryConfig) -> str:
        """Isolate the JSON span for the configured shape."""
        return self.extract_span(text, config.expect)

    @staticmethod
    def extract_span(text: str, expect: Shape = Shape.ANY) -> str:
        """
        Extract the JSON span from text.

        The span starts at the first opener outside a string literal. If the
        structure opened there closes, the span runs greedily to the last
        matching closer in the text; if it never closes, the output was
        truncated and the span runs to the end of the text.
        """
        start = find_first_opener(text, expect.openers)
        if start == -1:
            return text

        if find_structure_end(text, start) == -1:
            return text[start:]

        end = text.rfind(CLOSER_FOR[text[start]])
        return text[start : end + 1]


def greedy_spans(text: str, expect: Shape = Shape.ANY) -> list[str]:
    """
    Naive first-opener to last-closer spans, one per candidate delimiter.

    Unlike SpanExtractor this ignores string literals entirely, so it still
    finds the payload when unbalanced quotes in surrounding prose confuse the
    string-aware scan. Candidates are ordered by where their opener appears,
    and a later opener that falls inside an earlier candidate is skipped so a
    nested fragment is never offered as the whole document.
    """
    starts = []
    for opener in expect.openers:
        start = text.find(opener)
        if start != -1:
            starts.append((start, opener))

    spans = []
    covered_until = -1
    for start, opener in sorted(starts):
        if start <= covered_until:
            continue

        end = text.rfind(CLOSER_FOR[opener])
        if end < start:
            end = len(text) - 1
        spans.append(text[start : end + 1])
        covered_until = end
    return spans
