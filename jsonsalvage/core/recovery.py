"""
Recovery engine for jsonsalvage - salvages JSON documents from model completions.

recover() walks a completion through the repair pipeline and the standard
library decoder, retrying once with a greedy re-extraction before reporting a
RecoveryFailure. loads() and load() wrap it for callers that prefer exceptions.
"""

import dataclasses
import json
from typing import Any, Callable, Optional, TextIO, Union

from ..preprocessing.extractors import greedy_spans
from ..preprocessing.pipeline import RepairPipeline
from ..security.exceptions import SecurityError
from ..security.limits import LimitValidator
from ..utils.config import RecoveryConfig, Shape
from .results import (
    FailureKind,
    RecoveredValue,
    RecoveryFailure,
    RecoveryResult,
    RepairAction,
)

# Steps hold no state, so one instance of each pipeline serves every call
_DEFAULT_PIPELINE = RepairPipeline.create_default_pipeline()
_REPAIR_PIPELINE = RepairPipeline.create_repair_pipeline()


def recover(text: str, config: Optional[RecoveryConfig] = None) -> RecoveryResult:
    """
    Recover a structured value from a nominally-JSON model completion.

    The completion is trimmed, stripped of code fences, cut out of surrounding
    prose, and repaired (trailing commas, control characters, unclosed
    structures) before being decoded. If that fails, a greedy re-extraction of
    the trimmed input is tried before giving up.

    Args:
        text: Raw completion text; may be empty or arbitrarily noisy
        config: Optional RecoveryConfig controlling each stage

    Returns:
        RecoveredValue on success, RecoveryFailure otherwise. Malformed input
        never raises.

    Raises:
        TypeError: If text is not a str
    """
    return _recover(text, config or RecoveryConfig(), {})


def loads(
    s: Union[str, bytes, bytearray],
    *,
    object_hook: Optional[Callable[[dict[str, Any]], Any]] = None,
    parse_float: Optional[Callable[[str], Any]] = None,
    parse_int: Optional[Callable[[str], Any]] = None,
    parse_constant: Optional[Callable[[str], Any]] = None,
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None,
    # jsonsalvage-specific parameters
    config: Optional[RecoveryConfig] = None,
    expect: Optional[Shape] = None,
    strict_strings: Optional[bool] = None,
) -> Any:
    """
    Deserialize a model completion to a Python object, raising on failure.

    Standard json.loads hooks are passed through to the decoder.

    jsonsalvage-specific parameters:
        config: RecoveryConfig object for advanced control
        expect: Override config.expect for this call
        strict_strings: Override config.strict_strings for this call

    Returns:
        Parsed Python data structure

    Raises:
        RecoveryError: If no value could be recovered; carries the
            RecoveryFailure as its failure attribute
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")

    overrides: dict[str, Any] = {}
    if expect is not None:
        overrides["expect"] = expect
    if strict_strings is not None:
        overrides["strict_strings"] = strict_strings

    config = config or RecoveryConfig()
    if overrides:
        config = dataclasses.replace(config, **overrides)

    decoder_options = {
        "object_hook": object_hook,
        "parse_float": parse_float,
        "parse_int": parse_int,
        "parse_constant": parse_constant,
        "object_pairs_hook": object_pairs_hook,
    }
    result = _recover(s, config, decoder_options)
    if isinstance(result, RecoveryFailure):
        result.raise_error()
    return result.value


def load(fp: TextIO, **kw: Any) -> Any:
    """
    Deserialize a completion read from a file-like object.

    Same as loads() but reads from a file-like object.
    """
    return loads(fp.read(), **kw)


def _recover(
    text: str, config: RecoveryConfig, decoder_options: dict[str, Any]
) -> RecoveryResult:
    """Internal recovery used by both recover() and loads()."""
    if not isinstance(text, str):
        raise TypeError(
            f"the completion must be str, not {type(text).__name__}"
        )

    logger = config.get_logger()

    trimmed = text.strip()
    if not trimmed:
        return _failure(
            FailureKind.EMPTY_INPUT, "Input is empty or whitespace-only", text, config
        )

    applied: list[RepairAction] = []
    try:
        assert config.limits is not None
        LimitValidator(config.limits).validate_input_size(trimmed)

        # Strictly valid JSON is returned untouched by any repair
        try:
            return RecoveredValue(_decode(trimmed, True, decoder_options))
        except json.JSONDecodeError:
            pass

        candidate = _DEFAULT_PIPELINE.process(trimmed, config, applied)
        try:
            value = _decode(candidate, config.strict_strings, decoder_options)
        except json.JSONDecodeError as e:
            primary_error = e
            logger.debug(
                f"Parse failed after repairs "
                f"{[action.value for action in applied]}: {e}"
            )
        else:
            return RecoveredValue(value, tuple(applied))

        if config.fallback_extraction:
            recovered = _recover_by_fallback(
                trimmed, candidate, config, decoder_options
            )
            if recovered is not None:
                return recovered

    except SecurityError as e:
        return _failure(
            FailureKind.LIMIT_EXCEEDED, e.message, text, config, repairs=applied
        )

    return _failure(
        FailureKind.UNRECOVERABLE_SYNTAX,
        str(primary_error),
        text,
        config,
        position=primary_error.pos,
        repairs=applied,
    )


def _recover_by_fallback(
    trimmed: str,
    failed_candidate: str,
    config: RecoveryConfig,
    decoder_options: dict[str, Any],
) -> Optional[RecoveredValue]:
    """Retry with greedy spans of the trimmed input, skipping repeats."""
    logger = config.get_logger()
    tried = {failed_candidate}

    for span in greedy_spans(trimmed, config.expect):
        applied = [RepairAction.FALLBACK_EXTRACTED]
        candidate = _REPAIR_PIPELINE.process(span, config, applied)
        if candidate in tried:
            continue
        tried.add(candidate)

        try:
            value = _decode(candidate, config.strict_strings, decoder_options)
        except json.JSONDecodeError as e:
            logger.debug(f"Fallback extraction failed: {e}")
            continue

        logger.debug(f"Recovered {type(value).__name__} with fallback extraction")
        return RecoveredValue(value, tuple(applied), used_fallback=True)

    return None


def _decode(text: str, strict: bool, decoder_options: dict[str, Any]) -> Any:
    """Decode JSON, reporting decoder limits as a limit violation."""
    try:
        return json.loads(text, strict=strict, **decoder_options)
    except json.JSONDecodeError:
        raise
    except RecursionError as e:
        raise SecurityError("Document nesting exceeds the decoder's recursion limit") from e
    except ValueError as e:
        # e.g. the interpreter's cap on integer literal digits
        raise SecurityError(str(e)) from e


def _failure(
    kind: FailureKind,
    error: str,
    text: str,
    config: RecoveryConfig,
    position: Optional[int] = None,
    repairs: Optional[list[RepairAction]] = None,
) -> RecoveryFailure:
    """Build a RecoveryFailure and log it."""
    excerpt = text[: config.excerpt_length]
    config.get_logger().warning(
        f"JSON recovery failed ({kind.value}): {error} "
        f"[input {len(text)} chars, excerpt {len(excerpt)} chars]"
    )
    return RecoveryFailure(
        kind=kind,
        error=error,
        excerpt=excerpt,
        position=position,
        repairs=tuple(repairs or ()),
    )
