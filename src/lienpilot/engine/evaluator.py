"""
LienPilot Evaluator

Runs the full pipeline for one set of answers:

    normalize -> classify -> compute deadline -> score -> recommend -> assemble

Each evaluation is independent and stateless. The evaluation date is
always supplied by the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from ..models import DEFAULT_RULES, EngineResult, ScheduledDeadline, StatuteRules
from .deadline_calculator import DeadlineCalculator, as_date
from .kit_matcher import select_kit_track
from .normalizer import AnswerNormalizer
from .recommendation_builder import generate_recommendations
from .role_classifier import classify
from .schedule import ScheduleBuilder
from .validity_scorer import score_validity

logger = logging.getLogger(__name__)


@dataclass
class LienEngine:
    """
    Lien deadline and eligibility engine bound to one set of statute rules.

    Usage:
        engine = LienEngine()
        result = engine.evaluate(answers, today=date(2024, 2, 1))
        print(result.deadline.deadline_date, result.validity.level)
    """

    rules: StatuteRules = field(default_factory=lambda: DEFAULT_RULES)
    normalizer: AnswerNormalizer = field(default_factory=AnswerNormalizer)

    def __post_init__(self) -> None:
        self.calculator = DeadlineCalculator(rules=self.rules)
        self.schedule_builder = ScheduleBuilder(rules=self.rules)

    def evaluate(
        self,
        raw_answers: Mapping[str, Any],
        today: date,
        partial: bool = False,
    ) -> EngineResult:
        """
        Evaluate one set of answers.

        Args:
            raw_answers: Field id -> raw answer value
            today: Evaluation date
            partial: Accept an in-progress assessment with required
                answers still missing

        Returns:
            EngineResult

        Raises:
            ValidationError: Answers are missing or malformed
            ConfigurationError: A contract party slipped past normalization
        """
        today = as_date(today)
        assessment = self.normalizer.normalize(raw_answers, partial=partial)
        role = classify(assessment.contract_party)
        deadline = self.calculator.compute(assessment.last_work_date, role.tier, today)
        validity = score_validity(assessment, deadline)
        recommendations = generate_recommendations(
            assessment,
            deadline,
            validity,
            urgent_window_days=self.rules.urgent_window_days,
        )
        kit_track = select_kit_track(assessment, deadline, role)

        logger.debug(
            "Evaluated assessment: tier=%s deadline=%s days_remaining=%s validity=%s",
            role.tier.value,
            deadline.deadline_date,
            deadline.days_remaining,
            validity.level.value,
        )

        return EngineResult(
            assessment=assessment,
            role=role,
            deadline=deadline,
            validity=validity,
            recommendations=recommendations,
            kit_track=kit_track,
        )

    def schedule(
        self,
        raw_answers: Mapping[str, Any],
        today: date,
        partial: bool = False,
    ) -> tuple[ScheduledDeadline, ...]:
        """Normalize answers and build the full statutory schedule."""
        assessment = self.normalizer.normalize(raw_answers, partial=partial)
        return self.schedule_builder.build(assessment, as_date(today))


# =============================================================================
# Convenience Functions
# =============================================================================

def evaluate(
    raw_answers: Mapping[str, Any],
    today: date,
    partial: bool = False,
    rules: Optional[StatuteRules] = None,
) -> EngineResult:
    """
    Evaluate answers with the default (or given) statute rules.

    Convenience function that creates a temporary engine.
    """
    return LienEngine(rules=rules or DEFAULT_RULES).evaluate(raw_answers, today, partial=partial)
