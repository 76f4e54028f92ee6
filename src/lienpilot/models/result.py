"""
LienPilot Result Models

The validity rating, kit track and the assembled engine result handed to
the UI and the PDF report collaborator.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .assessment import ProjectAssessment, RoleClassification
from .deadline import DeadlineResult
from .enums import KitCategory, ValidityLevel


@dataclass(frozen=True)
class ValidityAssessment:
    """Qualitative strength of the lien claim."""
    level: ValidityLevel

    @property
    def is_expired(self) -> bool:
        return self.level == ValidityLevel.EXPIRED

    @property
    def is_rated(self) -> bool:
        return self.level.is_rated

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level.value}


@dataclass(frozen=True)
class KitTrack:
    """
    Which document kits fit the claimant's situation.

    Attributes:
        primary: The kit family to lead with
        secondary: Additional kit families, in display order
        reason: One-line explanation for the primary pick
        required_documents: Supporting documents to gather
    """
    primary: KitCategory
    secondary: tuple[KitCategory, ...] = field(default_factory=tuple)
    reason: str = ""
    required_documents: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": self.primary.value,
            "secondary": [k.value for k in self.secondary],
            "reason": self.reason,
            "required_documents": list(self.required_documents),
        }


@dataclass(frozen=True)
class EngineResult:
    """
    Everything the engine derives from one set of answers.

    Consumed identically by the results view and the PDF report builder.
    Never patched in place; a changed answer means a fresh evaluation.
    """
    assessment: ProjectAssessment
    role: RoleClassification
    deadline: DeadlineResult
    validity: ValidityAssessment
    recommendations: tuple[str, ...]
    kit_track: KitTrack

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "deadline": self.deadline.to_dict(),
            "validity": self.validity.to_dict(),
            "recommendations": list(self.recommendations),
            "role_tier": self.role.tier.value,
            "kit_track": self.kit_track.to_dict(),
        }
