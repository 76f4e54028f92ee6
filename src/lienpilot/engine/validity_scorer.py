"""
LienPilot Validity Scorer

Rates the strength of a lien claim from its risk factors.

Rules are evaluated top-down and the first match wins; the order encodes
severity. Risk factors never compound into a lower level.
"""
from __future__ import annotations

from ..models import (
    DeadlineResult,
    PreliminaryNoticeStatus,
    ProjectAssessment,
    ValidityAssessment,
    ValidityLevel,
)


def score_validity(
    assessment: ProjectAssessment,
    deadline: DeadlineResult,
) -> ValidityAssessment:
    """
    Score claim validity.

    Precedence:
        0. No deadline yet (last work date unknown) -> UNKNOWN
        1. Past the filing deadline -> EXPIRED (dominates everything)
        2. Verbal or no contract -> MODERATE
        3. Preliminary notice missed and its deadline passed -> WEAK
        4. Otherwise -> STRONG
    """
    if not deadline.is_known:
        return ValidityAssessment(level=ValidityLevel.UNKNOWN)

    if deadline.is_past_deadline:
        return ValidityAssessment(level=ValidityLevel.EXPIRED)

    if assessment.written_contract.is_weak:
        return ValidityAssessment(level=ValidityLevel.MODERATE)

    if assessment.preliminary_notice_status == PreliminaryNoticeStatus.NOT_SENT_PAST_DEADLINE:
        return ValidityAssessment(level=ValidityLevel.WEAK)

    return ValidityAssessment(level=ValidityLevel.STRONG)
