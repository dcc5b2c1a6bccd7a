"""
Configuration and limits for jsonsalvage recovery.

This module defines the extraction, repair and security settings that control
how aggressively a model completion is massaged before parsing.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Shape(Enum):
    """Expected top-level container of the recovered document."""

    ANY = "any"  # Whichever delimiter appears first wins
    OBJECT = "object"
    ARRAY = "array"

    @property
    def openers(self) -> str:
        """Opening delimiters that may start a document of this shape."""
        return _SHAPE_OPENERS[self.value]


_SHAPE_OPENERS = {"any": "{[", "object": "{", "array": "["}


@dataclass
class RecoveryLimits:
    """
    Security limits that bound the work done on a single completion.

    max_nesting_depth applies to the structures left open by truncated
    output, since those are the ones the recovery closes. Complete documents
    are bounded by the decoder's own recursion limit instead.
    """

    max_input_size: int = 10 * 1024 * 1024
    max_nesting_depth: int = 500

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class ExtractionSettings:
    """Settings for locating the JSON payload inside surrounding text."""
    strip_code_fences: bool = True
    isolate_json_span: bool = True
    fallback_extraction: bool = True


@dataclass
class RepairSettings:
    """Settings for syntax repairs applied to the isolated payload."""
    remove_trailing_commas: bool = True
    strip_control_characters: bool = True
    balance_brackets: bool = True


@dataclass
class RecoveryConfig:
    """Granular control over the recovery pipeline."""

    extraction: Optional[ExtractionSettings] = None
    repair: Optional[RepairSettings] = None
    limits: Optional[RecoveryLimits] = None
    expect: Shape = Shape.ANY
    strict_strings: bool = False
    excerpt_length: int = 1000
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        if self.extraction is None:
            self.extraction = ExtractionSettings()
        if self.repair is None:
            self.repair = RepairSettings()
        if self.limits is None:
            self.limits = RecoveryLimits()
        if self.excerpt_length < 0:
            raise ValueError("excerpt_length must not be negative")

    @property
    def strip_code_fences(self) -> bool:
        """Whether to remove markdown code fence delimiters."""
        assert self.extraction is not None
        return self.extraction.strip_code_fences

    @property
    def isolate_json_span(self) -> bool:
        """Whether to cut the payload out of surrounding prose."""
        assert self.extraction is not None
        return self.extraction.isolate_json_span

    @property
    def fallback_extraction(self) -> bool:
        """Whether to retry with a greedy extraction of the original text."""
        assert self.extraction is not None
        return self.extraction.fallback_extraction

    @property
    def remove_trailing_commas(self) -> bool:
        """Whether to drop commas directly before a closing delimiter."""
        assert self.repair is not None
        return self.repair.remove_trailing_commas

    @property
    def strip_control_characters(self) -> bool:
        """Whether to remove non-printable control characters."""
        assert self.repair is not None
        return self.repair.strip_control_characters

    @property
    def balance_brackets(self) -> bool:
        """Whether to append closers for structures left open by truncation."""
        assert self.repair is not None
        return self.repair.balance_brackets

    def get_logger(self) -> logging.Logger:
        """Logger used for diagnostics, falling back to the named one."""
        return self.logger or logging.getLogger("jsonsalvage")

    @classmethod
    def conservative(cls) -> "RecoveryConfig":
        """Create a configuration that never closes structures or re-extracts."""
        return cls(
            extraction=ExtractionSettings(fallback_extraction=False),
            repair=RepairSettings(balance_brackets=False),
        )

    @classmethod
    def aggressive(cls) -> "RecoveryConfig":
        """Create a configuration with every repair enabled."""
        return cls()

    @classmethod
    def from_features(cls, enabled_features: set[str]) -> "RecoveryConfig":
        """Create configuration from a set of enabled feature names."""
        config = cls(
            extraction=ExtractionSettings(
                strip_code_fences=False,
                isolate_json_span=False,
                fallback_extraction=False,
            ),
            repair=RepairSettings(
                remove_trailing_commas=False,
                strip_control_characters=False,
                balance_brackets=False,
            ),
        )

        field_mapping = {
            "strip_code_fences": "extraction",
            "isolate_json_span": "extraction",
            "fallback_extraction": "extraction",
            "remove_trailing_commas": "repair",
            "strip_control_characters": "repair",
            "balance_brackets": "repair",
        }

        for feature_name in enabled_features:
            if feature_name not in field_mapping:
                raise ValueError(f"Unknown recovery feature: {feature_name}")
            group = getattr(config, field_mapping[feature_name])
            setattr(group, feature_name, True)

        return config
