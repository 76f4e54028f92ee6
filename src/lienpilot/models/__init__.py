"""
LienPilot Models

Data models for the lien deadline and eligibility engine.

All models are frozen dataclasses: created fresh per evaluation and
never mutated afterwards.
"""
from __future__ import annotations

from .enums import (
    ContractParty,
    ContractStrength,
    DeadlineSeverity,
    DeadlineStatus,
    DeadlineType,
    KitCategory,
    PaymentDemandStatus,
    PreliminaryNoticeStatus,
    ProjectType,
    RoleTier,
    ValidityLevel,
)
from .assessment import ProjectAssessment, RoleClassification
from .deadline import UNKNOWN_DEADLINE, DeadlineResult, ScheduledDeadline
from .result import EngineResult, KitTrack, ValidityAssessment
from .rules import DEFAULT_RULES, StatuteRules

__all__ = [
    # Enums
    "ContractParty",
    "ContractStrength",
    "DeadlineSeverity",
    "DeadlineStatus",
    "DeadlineType",
    "KitCategory",
    "PaymentDemandStatus",
    "PreliminaryNoticeStatus",
    "ProjectType",
    "RoleTier",
    "ValidityLevel",
    # Assessment
    "ProjectAssessment",
    "RoleClassification",
    # Deadlines
    "DeadlineResult",
    "ScheduledDeadline",
    "UNKNOWN_DEADLINE",
    # Results
    "EngineResult",
    "KitTrack",
    "ValidityAssessment",
    # Rules
    "StatuteRules",
    "DEFAULT_RULES",
]
