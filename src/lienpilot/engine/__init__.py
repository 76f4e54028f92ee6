"""
LienPilot Engine

Pure, synchronous evaluation pipeline for Texas construction lien
deadlines and claim strength.

Components:
- AnswerNormalizer: Raw questionnaire answers to a ProjectAssessment
- classify: Contract party to statutory tier
- DeadlineCalculator: Controlling lien filing deadline
- score_validity: Qualitative claim strength
- generate_recommendations: Ordered action plan
- select_kit_track: Document kit families
- ScheduleBuilder: Full statutory deadline schedule
- LienEngine: The assembled pipeline
"""
from __future__ import annotations

from .deadline_calculator import (
    DeadlineCalculator,
    add_months,
    compute_deadline,
    days_between,
    nth_month_day,
)
from .evaluator import LienEngine, evaluate
from .kit_matcher import required_documents, select_kit_track
from .normalizer import FIELD_ALIASES, REQUIRED_FIELDS, AnswerNormalizer, normalize_answers
from .recommendation_builder import generate_recommendations
from .role_classifier import classify
from .schedule import (
    ScheduleBuilder,
    build_schedule,
    deadlines_needing_reminders,
    format_deadline,
    recalculate_schedule,
)
from .validity_scorer import score_validity

__all__ = [
    # Pipeline
    "LienEngine",
    "evaluate",
    # Normalizer
    "AnswerNormalizer",
    "normalize_answers",
    "FIELD_ALIASES",
    "REQUIRED_FIELDS",
    # Classifier
    "classify",
    # Deadline
    "DeadlineCalculator",
    "compute_deadline",
    "add_months",
    "nth_month_day",
    "days_between",
    # Scoring
    "score_validity",
    "generate_recommendations",
    "select_kit_track",
    "required_documents",
    # Schedule
    "ScheduleBuilder",
    "build_schedule",
    "recalculate_schedule",
    "deadlines_needing_reminders",
    "format_deadline",
]
