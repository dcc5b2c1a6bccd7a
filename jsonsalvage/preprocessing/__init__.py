"""
Completion repair module.

This module provides a modular pipeline for extracting and repairing the JSON
payload of a model completion before parsing. The work is broken down into
focused, single-responsibility steps that can be composed into a pipeline.
"""

from .base import RepairStepBase
from .extractors import FenceStripper, SpanExtractor, greedy_spans
from .pipeline import RepairPipeline
from .repairers import BracketBalancer, ControlCharacterStripper, TrailingCommaRemover

__all__ = [
    "RepairPipeline",
    "RepairStepBase",
    "FenceStripper",
    "SpanExtractor",
    "greedy_spans",
    "TrailingCommaRemover",
    "ControlCharacterStripper",
    "BracketBalancer",
]
