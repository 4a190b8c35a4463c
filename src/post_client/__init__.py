"""
Typed Post Client

Result-based client for a posts REST API. Failures are returned as typed
values instead of raised, so every call site handles them explicitly.
"""

from .result import Failure, Result, Success

__version__ = "0.1.0"

__all__ = ["Failure", "Result", "Success"]
