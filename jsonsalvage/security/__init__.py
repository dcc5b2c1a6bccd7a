"""
jsonsalvage Security and Error System.

This module provides recovery limits and exception handling.
"""

from .exceptions import ErrorSuggestionEngine, RecoveryError, SalvageError, SecurityError
from .limits import LimitValidator

__all__ = [
    'SalvageError', 'RecoveryError', 'SecurityError',
    'ErrorSuggestionEngine', 'LimitValidator',
]
