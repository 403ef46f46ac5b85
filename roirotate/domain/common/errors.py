# roirotate/domain/common/errors.py

"""
Error types.

Expected failures travel inside a Result as DomainError objects; each subclass
fixes its category. Programming errors (a region kind with no rotation
strategy) are raised as exceptions.
"""
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCategory(Enum):
    VALIDATION = "Validation"
    CONFIGURATION = "Configuration"
    RESOURCE = "Resource"
    UI = "UI"
    UNKNOWN = "Unknown"


class DomainError:
    """
    A failure carried by a Result.

    Attributes:
        message: Human-readable error message
        details: Context for logging (paths, angles, sizes)
        inner_error: The exception that caused the failure, if any
    """

    category = ErrorCategory.UNKNOWN

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 inner_error: Optional[Exception] = None):
        self.message = message
        self.details = details or {}
        self.inner_error = inner_error

    def __str__(self) -> str:
        return f"{self.category.value} Error: {self.message}"


class ValidationError(DomainError):
    """Missing selection or region, non-finite angle or center."""
    category = ErrorCategory.VALIDATION


class ConfigurationError(DomainError):
    """Config file cannot be read, parsed or written."""
    category = ErrorCategory.CONFIGURATION


class ResourceError(DomainError):
    """Image or canvas cannot be created."""
    category = ErrorCategory.RESOURCE


class UIError(DomainError):
    """No dialog available, or its answer is unusable."""
    category = ErrorCategory.UI


class RegionKindError(TypeError):
    """
    Raised when a region's kind has no rotation strategy.

    This is a programming error: the dispatch table must cover every
    RegionKind, so it is never converted into a failed Result.
    """

    def __init__(self, kind: Any, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or f"No rotation strategy for region kind {kind!r}")
