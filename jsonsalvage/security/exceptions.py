"""
Exception hierarchy and error suggestions for jsonsalvage.

recover() reports failures as values; these exceptions exist for the raising
helpers (loads/load) and for limit violations detected inside the pipeline.
"""

import re
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.results import RecoveryFailure


class SalvageError(Exception):
    """Base exception for all jsonsalvage errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        parts = [self.message]
        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(parts)


class SecurityError(SalvageError):
    """Raised when a completion exceeds the configured recovery limits."""


class RecoveryError(SalvageError, ValueError):
    """Raised by the raising helpers when no value could be recovered."""

    def __init__(self, failure: "RecoveryFailure", excerpt_preview: int = 80):
        self.failure = failure

        message = f"Could not recover JSON ({failure.kind.value}): {failure.error}"
        if failure.excerpt:
            preview = failure.excerpt[:excerpt_preview]
            if len(failure.excerpt) > excerpt_preview:
                preview += "..."
            message += f"\nInput: {preview!r}"

        super().__init__(
            message, ErrorSuggestionEngine.suggest_for_failure(failure)
        )


class ErrorSuggestionEngine:
    """Generates helpful suggestions for recovery failures."""

    _KIND_SUGGESTIONS = {
        "empty_input": [
            "The model returned no content; retry the generation request",
        ],
        "limit_exceeded": [
            "Raise RecoveryLimits if the completion is legitimately this large",
            "Ask the model for a smaller response",
        ],
    }

    _MESSAGE_SUGGESTIONS = [
        (
            re.compile(r"Expecting ',' delimiter|Extra data"),
            [
                "A string value may contain an unescaped double quote",
                "Ask the model to escape quotes inside values as \\\"",
            ],
        ),
        (
            re.compile(r"Unterminated string"),
            [
                "The completion was probably cut off inside a string value",
                "Increase the output token limit and retry",
            ],
        ),
        (
            re.compile(r"Expecting value"),
            [
                "A key is missing its value, or no JSON was present at all",
                "Retry the generation request",
            ],
        ),
        (
            re.compile(r"Expecting property name|Expecting ':' delimiter"),
            [
                "An object key is incomplete; the completion may be truncated",
            ],
        ),
    ]

    @classmethod
    def suggest_for_failure(cls, failure: "RecoveryFailure") -> list[str]:
        """Suggest follow-up actions for a recovery failure."""
        kind_suggestions = cls._KIND_SUGGESTIONS.get(failure.kind.value)
        if kind_suggestions is not None:
            return list(kind_suggestions)
        return cls.suggest_for_parser_message(failure.error)

    @classmethod
    def suggest_for_parser_message(cls, message: str) -> list[str]:
        """Suggest fixes based on the decoder's error message."""
        for pattern, suggestions in cls._MESSAGE_SUGGESTIONS:
            if pattern.search(message):
                return list(suggestions)
        return []
