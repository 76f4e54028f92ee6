"""
LienPilot Recommendation Builder

Produces the ordered action plan shown on the results page and in the
PDF report.

Unlike the validity scorer, every matching condition contributes. The
append order is fixed so identical inputs always yield the identical
list, and no text is ever repeated.
"""
from __future__ import annotations

from typing import Iterable

from ..models import (
    DeadlineResult,
    PaymentDemandStatus,
    PreliminaryNoticeStatus,
    ProjectAssessment,
    ProjectType,
    ValidityAssessment,
)


# =============================================================================
# Recommendation Text
# =============================================================================

DEADLINE_PASSED = (
    "Unfortunately, your lien filing deadline has passed. "
    "You may still have other legal remedies."
)
CONSULT_ATTORNEY = (
    "Consider consulting an attorney about breach of contract "
    "or unjust enrichment claims."
)
WEAK_CONTRACT = (
    "Lack of written contract weakens your position. "
    "Gather all documentation of work performed."
)
NOTICE_MISSED = "Missing preliminary notices may affect your lien rights. File immediately."
NOTICE_PENDING = "Send preliminary notice immediately if you haven't already."
PAYMENT_DEMAND = "Send formal payment demand letter immediately, documenting all amounts owed."
URGENT_TEMPLATE = "URGENT: You have only {days} days remaining to file your mechanics lien!"
PUBLIC_PROJECT = (
    "Government projects have special bond claim requirements "
    "instead of traditional liens."
)
GATHER_DOCUMENTATION = "Compile all invoices, change orders, daily logs, and photos of your work."
PROPERTY_RECORDS = "Get a property records report to identify the legal property owner."
STILL_HAVE_TIME = "You still have time, but don't delay. Prepare your lien documents now."


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    """Drop repeats, keeping first-occurrence order."""
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return tuple(ordered)


def generate_recommendations(
    assessment: ProjectAssessment,
    deadline: DeadlineResult,
    validity: ValidityAssessment,
    urgent_window_days: int = 30,
) -> tuple[str, ...]:
    """
    Build the ordered, de-duplicated recommendation list.

    Args:
        assessment: Normalized answers
        deadline: Controlling filing deadline
        validity: Validity rating; EXPIRED is handled like a passed deadline
        urgent_window_days: Remaining days above which the
            "still have time" reminder is added

    Returns:
        Tuple of recommendation strings, blocking items first; empty
        while the deadline is still unknown
    """
    if not deadline.is_known:
        return ()

    if deadline.is_past_deadline or validity.is_expired:
        return (DEADLINE_PASSED, CONSULT_ATTORNEY)

    items: list[str] = []

    if assessment.written_contract.is_weak:
        items.append(WEAK_CONTRACT)

    notice = assessment.preliminary_notice_status
    if notice == PreliminaryNoticeStatus.NOT_SENT_PAST_DEADLINE:
        items.append(NOTICE_MISSED)
    elif notice != PreliminaryNoticeStatus.SENT_ON_TIME:
        items.append(NOTICE_PENDING)

    if assessment.payment_demand_status == PaymentDemandStatus.NONE:
        items.append(PAYMENT_DEMAND)

    if deadline.is_urgent:
        items.append(URGENT_TEMPLATE.format(days=deadline.days_remaining))

    if assessment.project_type == ProjectType.PUBLIC:
        items.append(PUBLIC_PROJECT)

    items.append(GATHER_DOCUMENTATION)
    items.append(PROPERTY_RECORDS)

    if deadline.days_remaining is not None and deadline.days_remaining > urgent_window_days:
        items.append(STILL_HAVE_TIME)

    return _unique(items)
