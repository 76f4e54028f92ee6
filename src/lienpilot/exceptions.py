"""
LienPilot Exception Hierarchy

Domain-specific exceptions for lien deadline and eligibility evaluation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: LP_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LienPilotError(Exception):
    """
    Base exception for all LienPilot errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (LP_*)
        details: Additional context about the error
    """
    message: str
    code: str = "LP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Input Errors
# =============================================================================

@dataclass(frozen=True)
class FieldError:
    """A single field-level problem found while normalizing answers."""
    field: str
    message: str
    value: Optional[Any] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"field": self.field, "message": self.message}
        if self.value is not None:
            result["value"] = str(self.value)
        return result


@dataclass
class ValidationError(LienPilotError):
    """
    Raw questionnaire answers are missing or malformed.

    Carries every violation found, not just the first, so the caller can
    show field-level messages in one pass.
    """
    code: str = "LP_VALIDATION_ERROR"
    errors: list[FieldError] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        fields = ", ".join(e.field for e in self.errors)
        return f"[{self.code}] {self.message} ({fields})"

    @property
    def fields(self) -> list[str]:
        """Field ids with at least one violation, in detection order."""
        seen: list[str] = []
        for error in self.errors:
            if error.field not in seen:
                seen.append(error.field)
        return seen

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [e.to_dict() for e in self.errors]
        return result


# =============================================================================
# Programming / Configuration Errors
# =============================================================================

@dataclass
class ConfigurationError(LienPilotError):
    """
    A value outside a known enumeration reached a classifier.

    Unreachable when inputs come through the normalizer; treated as fatal.
    """
    code: str = "LP_CONFIGURATION_ERROR"


@dataclass
class RulePackLoadError(LienPilotError):
    """Failed to read a statute rule pack from disk."""
    code: str = "LP_RULE_PACK_LOAD_ERROR"


@dataclass
class RulePackValidationError(LienPilotError):
    """Statute rule pack failed schema validation."""
    code: str = "LP_RULE_PACK_VALIDATION_ERROR"
