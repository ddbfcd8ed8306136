"""
Analysis Bridge Exception Hierarchy

Separates programmer errors, which are always raised synchronously before
any backend call, from failures of the analysis engines themselves.
"""
from enum import Enum
from typing import Optional, Any


class ErrorKind(Enum):
    """Kinds of bridge errors"""
    COMPATIBILITY = "compatibility"  # Operation unsupported by backend family
    VALIDATION = "validation"        # Malformed caller input
    BACKEND = "backend"              # Analysis engine failed


class BridgeError(Exception):
    """
    Base class for analysis bridge errors

    Attributes:
        message: Human-readable error message
        kind: ErrorKind of the failure
        backend_family: Backend family involved, if any
        operation: Operation that was requested, if any
        original_error: Original exception if wrapped
    """

    kind = ErrorKind.BACKEND

    def __init__(
        self,
        message: str,
        backend_family: Optional[Any] = None,
        operation: Optional[Any] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.backend_family = backend_family
        self.operation = operation
        self.original_error = original_error

    def __str__(self):
        parts = [f"{self.kind.value.upper()}: {self.message}"]
        if self.backend_family is not None:
            family = getattr(self.backend_family, "value", self.backend_family)
            parts.append(f"(backend: {family})")
        return " ".join(parts)


class CompatibilityError(BridgeError):
    """
    Requested operation is not supported by the backend family

    Raised before any backend call and never retried.
    """

    kind = ErrorKind.COMPATIBILITY


# Name used by the capability table
UnsupportedOperationError = CompatibilityError


class ValidationError(BridgeError):
    """
    Malformed caller input

    Examples: mismatched surface/tag batches, unknown tag names, input that
    is neither text nor tagged sentences.
    """

    kind = ErrorKind.VALIDATION


class BackendError(BridgeError):
    """
    The wrapped analysis engine failed or returned an inconsistent result

    Backends may raise this (or anything else); the bridge surfaces the
    exception object unchanged.
    """

    kind = ErrorKind.BACKEND
