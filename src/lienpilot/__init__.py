"""
LienPilot - Texas Construction Lien Deadline & Eligibility Engine

LienPilot turns a contractor's questionnaire answers into a filing
deadline, a claim-strength rating, and an ordered action plan under
Chapter 53 of the Texas Property Code.

Core Principle: "Same answers, same date, same result."

Key Features:
- Calendar-month deadline arithmetic for both claimant tiers
- Aggregated input validation (every bad answer reported at once)
- Qualitative validity rating (strong / moderate / weak / expired,
  or unknown until the last work date is answered)
- Deterministic, duplicate-free recommendations
- Full statutory deadline schedule (notices, bond claims, foreclosure)
- Versioned YAML statute rule pack

Quick Start:
    from datetime import date
    from lienpilot import evaluate

    result = evaluate(
        {
            "contract_party": "General contractor",
            "last_work_date": "2024-01-20",
            "written_contract": "Yes, signed written contract",
        },
        today=date(2024, 2, 1),
    )
    print(result.deadline.deadline_date)   # 2024-03-15
    print(result.validity.level)           # ValidityLevel.STRONG

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "LienPilot Team"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
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
    # Models
    DeadlineResult,
    EngineResult,
    KitTrack,
    ProjectAssessment,
    RoleClassification,
    ScheduledDeadline,
    StatuteRules,
    ValidityAssessment,
    DEFAULT_RULES,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    ConfigurationError,
    FieldError,
    LienPilotError,
    RulePackLoadError,
    RulePackValidationError,
    ValidationError,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    LienEngine,
    build_schedule,
    classify,
    compute_deadline,
    evaluate,
    generate_recommendations,
    normalize_answers,
    score_validity,
    select_kit_track,
)
from .packs import load_rules

__all__ = [
    "__version__",
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
    # Models
    "DeadlineResult",
    "EngineResult",
    "KitTrack",
    "ProjectAssessment",
    "RoleClassification",
    "ScheduledDeadline",
    "StatuteRules",
    "ValidityAssessment",
    "DEFAULT_RULES",
    # Exceptions
    "LienPilotError",
    "ValidationError",
    "FieldError",
    "ConfigurationError",
    "RulePackLoadError",
    "RulePackValidationError",
    # Engine
    "LienEngine",
    "evaluate",
    "normalize_answers",
    "classify",
    "compute_deadline",
    "score_validity",
    "generate_recommendations",
    "select_kit_track",
    "build_schedule",
    "load_rules",
]
