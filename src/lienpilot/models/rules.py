"""
LienPilot Statute Rules

Immutable statutory constants the engine computes against. Defaults match
the bundled Texas Property Code rule pack, so the engine can run without
touching the filesystem.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .enums import DeadlineType, RoleTier


DEFAULT_LEGAL_REFERENCES: dict[str, str] = {
    DeadlineType.PRELIMINARY_NOTICE.value: "Texas Property Code § 53.056",
    DeadlineType.MONTHLY_NOTICE.value: "Texas Property Code § 53.056(e)",
    DeadlineType.RETAINAGE_NOTICE.value: "Texas Property Code § 53.056(c)",
    DeadlineType.MECHANICS_LIEN.value: "Texas Property Code § 53.052",
    DeadlineType.BOND_CLAIM.value: "Texas Government Code § 2253.073",
    DeadlineType.LAWSUIT_FILING.value: "Texas Property Code § 53.158",
    DeadlineType.PAYMENT_DEMAND.value: "Best Practice",
}


@dataclass(frozen=True)
class StatuteRules:
    """
    Statutory timing constants for one jurisdiction's lien statute.

    Month-based rules are applied with calendar-month arithmetic and a
    forced day of month; day-based rules are plain day offsets.
    """
    id: str = "US-TX-PROPERTY-CODE-53"
    name: str = "Texas Property Code Chapter 53"
    jurisdiction: str = "US-TX"
    version: str = "1.0.0"

    # Mechanics lien filing
    original_contractor_months: int = 3
    subcontractor_months: int = 2
    filing_day_of_month: int = 15
    urgent_window_days: int = 30

    # Preliminary notice
    preliminary_notice_months: int = 1
    preliminary_notice_day_of_month: int = 15
    preliminary_notice_warning_days: int = 7

    # Other notices and claims
    retainage_notice_days_before_lien: int = 30
    bond_claim_original_contractor_days: int = 90
    bond_claim_subcontractor_days: int = 60
    bond_claim_warning_days: int = 14
    lawsuit_months_after_lien: int = 24
    payment_demand_days: int = 10

    # Severity bands
    critical_warning_days: int = 7
    high_warning_days: int = 14
    medium_warning_days: int = 30

    legal_references: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_LEGAL_REFERENCES)
    )

    def __hash__(self) -> int:
        return hash((self.id, self.version))

    def months_for(self, tier: RoleTier) -> int:
        """Calendar months from last work to the filing month."""
        if tier == RoleTier.ORIGINAL_CONTRACTOR:
            return self.original_contractor_months
        return self.subcontractor_months

    def bond_claim_days_for(self, tier: RoleTier) -> int:
        if tier == RoleTier.ORIGINAL_CONTRACTOR:
            return self.bond_claim_original_contractor_days
        return self.bond_claim_subcontractor_days

    def legal_reference(self, deadline_type: DeadlineType) -> str:
        return self.legal_references.get(deadline_type.value, "")

    def to_dict(self) -> dict[str, Any]:
        """Summary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "jurisdiction": self.jurisdiction,
            "version": self.version,
            "original_contractor_months": self.original_contractor_months,
            "subcontractor_months": self.subcontractor_months,
            "filing_day_of_month": self.filing_day_of_month,
            "urgent_window_days": self.urgent_window_days,
        }


DEFAULT_RULES = StatuteRules()
