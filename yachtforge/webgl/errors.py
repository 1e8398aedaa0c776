"""
webgl/errors.py - Error taxonomy.

Structured error types for configuration payloads and generated meshes.
Generators handle degenerate input locally and do not raise; these errors
come from the payload boundary and from explicit mesh validation.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from enum import Enum
import logging

logger = logging.getLogger("yachtforge.webgl.errors")


# =============================================================================
# ERROR CATEGORIES AND SEVERITY
# =============================================================================

class GeometryErrorCategory(Enum):
    """Categories of errors."""
    CONFIGURATION = "configuration"   # Payload could not become a record
    VALIDATION = "mesh_validation"    # Mesh buffers are malformed


class GeometryErrorSeverity(Enum):
    """Severity levels for errors."""
    ERROR = "error"
    WARNING = "warning"


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class GeometryError(Exception):
    """
    Base class for yachtforge errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint
    - Detailed context for debugging
    """

    code: str = "YF_000"
    category: GeometryErrorCategory = GeometryErrorCategory.VALIDATION
    severity: GeometryErrorSeverity = GeometryErrorSeverity.ERROR

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Geometry error"
        self.recovery_hint = recovery_hint
        self.details = dict(details or {})
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class ConfigurationError(GeometryError):
    """Configuration payload is structurally invalid."""

    code = "YF_001"
    category = GeometryErrorCategory.CONFIGURATION
    severity = GeometryErrorSeverity.ERROR

    def __init__(self, record: str, issues: List[str], **kwargs):
        issue_count = len(issues)
        message = f"Invalid {record} payload with {issue_count} issue(s)"
        if issues:
            message += f": {issues[0]}"
            if issue_count > 1:
                message += f" (+{issue_count - 1} more)"

        super().__init__(
            message=message,
            recovery_hint="Check field names and numeric types against the record definition.",
            record=record,
            issues=list(issues),
            issue_count=issue_count,
            **kwargs,
        )


class MeshValidationError(GeometryError):
    """Mesh validation failed."""

    code = "YF_002"
    category = GeometryErrorCategory.VALIDATION
    severity = GeometryErrorSeverity.ERROR

    def __init__(self, mesh_id: str, issues: List[str], **kwargs):
        issue_count = len(issues)
        message = f"Mesh '{mesh_id}' failed validation with {issue_count} issue(s)"
        if issues:
            message += f": {issues[0]}"
            if issue_count > 1:
                message += f" (+{issue_count - 1} more)"

        super().__init__(
            message=message,
            recovery_hint="Regenerate the mesh; buffers must not be edited after construction.",
            mesh_id=mesh_id,
            issues=list(issues),
            issue_count=issue_count,
            **kwargs,
        )


# =============================================================================
# HELPERS
# =============================================================================

ERROR_CODES = {
    "YF_000": "Generic error",
    "YF_001": "Invalid configuration payload",
    "YF_002": "Mesh validation failed",
}


def create_error_from_dict(data: Dict[str, Any]) -> GeometryError:
    """Rebuild an error from its ``to_dict`` form."""
    code = data.get("code", "YF_000")
    details = data.get("details", {})

    if code == ConfigurationError.code:
        return ConfigurationError(
            record=details.get("record", "unknown"),
            issues=details.get("issues", [data.get("message", "")]),
        )
    if code == MeshValidationError.code:
        return MeshValidationError(
            mesh_id=details.get("mesh_id", ""),
            issues=details.get("issues", [data.get("message", "")]),
        )
    return GeometryError(
        message=data.get("message", "Unknown error"),
        recovery_hint=data.get("recovery_hint", ""),
        details=details,
    )
