"""
jsonsalvage - salvage structured data from LLM completions that were meant to be JSON.

Model completions that should be JSON often arrive wrapped in prose or markdown
code fences, cut off by a token limit, or sprinkled with trailing commas and
control characters. jsonsalvage applies the smallest set of repairs needed to
reach valid JSON and reports a typed failure when it cannot, without ever
inventing data.

Quick Start:
    from jsonsalvage import recover

    result = recover('Sure! Here you go: ```json\\n{"score": [1, 2, 3\\n')
    if result.ok:
        report = result.value          # {'score': [1, 2, 3]}
    else:
        print(result.kind, result.error)  # show a retry action instead

    # Exception style, like json.loads
    import jsonsalvage
    participants = jsonsalvage.loads(completion, expect=jsonsalvage.Shape.ARRAY)
"""

from .core.recovery import load, loads, recover
from .core.results import FailureKind, RecoveredValue, RecoveryFailure, RecoveryResult, RepairAction
from .preprocessing.pipeline import RepairPipeline
from .security.exceptions import RecoveryError, SalvageError, SecurityError
from .utils.config import ExtractionSettings, RecoveryConfig, RecoveryLimits, RepairSettings, Shape

__version__ = "0.1.0"
__author__ = "jsonsalvage contributors"

__all__ = [
    # Recovery functions
    "recover", "loads", "load",
    # Result types
    "RecoveredValue", "RecoveryFailure", "RecoveryResult", "FailureKind", "RepairAction",
    # Configuration classes
    "RecoveryConfig", "ExtractionSettings", "RepairSettings", "RecoveryLimits", "Shape",
    # Exception classes
    "SalvageError", "RecoveryError", "SecurityError",
    # Advanced classes
    "RepairPipeline",
]
