"""
Result types returned by recover().

A recovery either yields a RecoveredValue or a RecoveryFailure; both are plain
immutable values so callers can tell "no data" apart from "valid but empty".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, NoReturn, Optional, Union


class RepairAction(Enum):
    """Repairs the pipeline can apply to a completion."""

    FENCES_STRIPPED = "fences_stripped"
    SPAN_EXTRACTED = "span_extracted"
    TRAILING_COMMAS_REMOVED = "trailing_commas_removed"
    CONTROL_CHARACTERS_REMOVED = "control_characters_removed"
    BRACKETS_CLOSED = "brackets_closed"
    FALLBACK_EXTRACTED = "fallback_extracted"


class FailureKind(Enum):
    """Why no value could be recovered."""

    EMPTY_INPUT = "empty_input"
    UNRECOVERABLE_SYNTAX = "unrecoverable_syntax"
    LIMIT_EXCEEDED = "limit_exceeded"


@dataclass(frozen=True)
class RecoveredValue:
    """A structured value parsed after zero or more repairs."""

    value: Any
    repairs: tuple[RepairAction, ...] = ()
    used_fallback: bool = False

    ok: ClassVar[bool] = True

    @property
    def repaired(self) -> bool:
        """True if any repair was needed to reach valid JSON."""
        return bool(self.repairs)


@dataclass(frozen=True)
class RecoveryFailure:
    """Terminal outcome: no valid structure could be recovered."""

    kind: FailureKind
    error: str
    excerpt: str = ""  # Bounded prefix of the original completion
    position: Optional[int] = None  # Decoder offset in the repaired text
    repairs: tuple[RepairAction, ...] = ()

    ok: ClassVar[bool] = False

    def raise_error(self) -> NoReturn:
        """Raise this failure as a RecoveryError."""
        from ..security.exceptions import RecoveryError

        raise RecoveryError(self)


RecoveryResult = Union[RecoveredValue, RecoveryFailure]
