"""
jsonsalvage Core Recovery Engine.

This module provides the recovery entry points, result types and the
string-aware scanner shared by the repair steps.
"""

from .recovery import load, loads, recover
from .results import FailureKind, RecoveredValue, RecoveryFailure, RecoveryResult, RepairAction
from .scanner import StringStateTracker, StructureScan, scan_structure

__all__ = [
    'recover', 'loads', 'load',
    'RecoveredValue', 'RecoveryFailure', 'RecoveryResult',
    'FailureKind', 'RepairAction',
    'StringStateTracker', 'StructureScan', 'scan_structure',
]
