"""
LienPilot Assessment Models

The normalized, strongly typed view of a claimant's questionnaire answers
and the role classification derived from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from .enums import (
    ContractParty,
    ContractStrength,
    PaymentDemandStatus,
    PreliminaryNoticeStatus,
    ProjectType,
    RoleTier,
)


@dataclass(frozen=True)
class ProjectAssessment:
    """
    Normalized questionnaire answers for one construction project.

    Immutable once constructed. Built by the normalizer; optional answers
    arrive here already defaulted to their neutral/unknown value.

    Attributes:
        contract_party: Who the claimant contracted with directly
        last_work_date: Last day labor or materials were furnished
        project_type: Kind of project
        work_start_date: First day labor or materials were furnished
        amount_owed: Unpaid balance (non-negative)
        written_contract: Form of the agreement
        preliminary_notice_status: Whether notice went out on time
        payment_demand_status: Formal payment demands made so far
        has_existing_lien: A lien has already been filed on this project
        retainage_amount: Retained funds still held back (non-negative)
    """
    contract_party: ContractParty
    last_work_date: Optional[date]
    project_type: ProjectType = ProjectType.OTHER
    work_start_date: Optional[date] = None
    amount_owed: Decimal = Decimal("0")
    written_contract: ContractStrength = ContractStrength.NONE
    preliminary_notice_status: PreliminaryNoticeStatus = PreliminaryNoticeStatus.UNKNOWN
    payment_demand_status: PaymentDemandStatus = PaymentDemandStatus.NONE
    has_existing_lien: bool = False
    retainage_amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if self.amount_owed < 0:
            raise ValueError("amount_owed must be non-negative")
        if self.retainage_amount < 0:
            raise ValueError("retainage_amount must be non-negative")
        if (
            self.work_start_date is not None
            and self.last_work_date is not None
            and self.last_work_date < self.work_start_date
        ):
            raise ValueError("last_work_date cannot precede work_start_date")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "project_type": self.project_type.value,
            "contract_party": self.contract_party.value,
            "work_start_date": self.work_start_date.isoformat() if self.work_start_date else None,
            "last_work_date": self.last_work_date.isoformat() if self.last_work_date else None,
            "amount_owed": str(self.amount_owed),
            "written_contract": self.written_contract.value,
            "preliminary_notice_status": self.preliminary_notice_status.value,
            "payment_demand_status": self.payment_demand_status.value,
            "has_existing_lien": self.has_existing_lien,
            "retainage_amount": str(self.retainage_amount),
        }


@dataclass(frozen=True)
class RoleClassification:
    """Contractual tier derived from the contract party."""
    tier: RoleTier
    contract_party: ContractParty

    @property
    def is_original_contractor(self) -> bool:
        return self.tier == RoleTier.ORIGINAL_CONTRACTOR
