"""
LienPilot Kit Matcher

Picks the document kit track that fits a claimant's situation and lists
the supporting documents to gather. Returns kit families only; the kit
catalog itself lives in the storefront.
"""
from __future__ import annotations

from typing import Optional

from ..models import (
    ContractStrength,
    DeadlineResult,
    KitCategory,
    KitTrack,
    PreliminaryNoticeStatus,
    ProjectAssessment,
    ProjectType,
    RoleClassification,
)
from .role_classifier import classify


_CATEGORY_BY_PROJECT: dict[ProjectType, KitCategory] = {
    ProjectType.RESIDENTIAL_SINGLE: KitCategory.RESIDENTIAL,
    ProjectType.RESIDENTIAL_MULTI: KitCategory.RESIDENTIAL,
    ProjectType.COMMERCIAL: KitCategory.COMMERCIAL,
    ProjectType.INDUSTRIAL: KitCategory.COMMERCIAL,
    ProjectType.PUBLIC: KitCategory.BOND_CLAIM,
    ProjectType.OTHER: KitCategory.RESIDENTIAL,
}

_PHOTO_PROJECTS = frozenset({
    ProjectType.RESIDENTIAL_SINGLE,
    ProjectType.RESIDENTIAL_MULTI,
    ProjectType.COMMERCIAL,
})


def required_documents(assessment: ProjectAssessment) -> tuple[str, ...]:
    """Supporting documents to assemble before filing."""
    docs: list[str] = []

    if assessment.written_contract == ContractStrength.WRITTEN_SIGNED:
        docs.append("Signed written contract")
    elif assessment.written_contract == ContractStrength.PURCHASE_ORDER:
        docs.append("Purchase order, work order, or written confirmation")
    else:
        docs.append("Written summary of the agreement")

    docs.append("Invoices for all work performed or materials delivered")
    docs.append("Payment records showing amounts received and still owed")

    if assessment.preliminary_notice_status in (
        PreliminaryNoticeStatus.SENT_ON_TIME,
        PreliminaryNoticeStatus.SENT_LATE,
    ):
        docs.append("Copy of the preliminary notice and proof of delivery")

    if assessment.project_type in _PHOTO_PROJECTS:
        docs.append("Photos of work performed or materials delivered")

    docs.append("Emails, letters, or texts about the project or payment")
    return tuple(docs)


def select_kit_track(
    assessment: ProjectAssessment,
    deadline: DeadlineResult,
    role: Optional[RoleClassification] = None,
) -> KitTrack:
    """
    Select the primary and secondary kit families.

    An existing lien switches to the release track; public projects go to
    bond claims; a closed filing window leaves only a payment demand.
    """
    role = role or classify(assessment.contract_party)
    docs = required_documents(assessment)

    if assessment.has_existing_lien:
        return KitTrack(
            primary=KitCategory.RELEASE_OF_LIEN,
            reason="A lien is already on record for this project",
            required_documents=docs,
        )

    # Bond claim windows run independently of the lien deadline.
    primary = _CATEGORY_BY_PROJECT[assessment.project_type]
    if primary == KitCategory.BOND_CLAIM:
        reason = "Public projects are protected by payment bonds instead of liens"
    elif deadline.is_past_deadline:
        return KitTrack(
            primary=KitCategory.PAYMENT_DEMAND,
            reason="The lien filing window has closed; pursue payment directly",
            required_documents=docs,
        )
    else:
        reason = f"Recommended for {assessment.project_type.value.replace('-', ' ')} projects"
        if not role.is_original_contractor:
            reason += " as a subcontractor-tier claimant"

    secondary: list[KitCategory] = []
    if not role.is_original_contractor:
        secondary.append(KitCategory.SUBCONTRACTOR)
    if (
        assessment.preliminary_notice_status != PreliminaryNoticeStatus.SENT_ON_TIME
        and not deadline.is_past_deadline
    ):
        secondary.append(KitCategory.PRELIMINARY_NOTICE)
    if deadline.is_urgent:
        secondary.append(KitCategory.SPECIALTY)

    return KitTrack(
        primary=primary,
        secondary=tuple(k for k in dict.fromkeys(secondary) if k != primary),
        reason=reason,
        required_documents=docs,
    )
