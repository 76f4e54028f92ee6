"""
LienPilot Enumerations

All enumeration types used throughout the LienPilot engine.
Organized by domain area for clarity.

All enums inherit from (str, Enum) for JSON serialization compatibility.
Values are the canonical answer tokens accepted by the normalizer.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


# =============================================================================
# Project
# =============================================================================

class ProjectType(str, Enum):
    """Kind of construction project the work was performed on."""
    RESIDENTIAL_SINGLE = "residential-single"
    RESIDENTIAL_MULTI = "residential-multi"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    PUBLIC = "public"
    OTHER = "other"

    @property
    def is_residential(self) -> bool:
        return self in (ProjectType.RESIDENTIAL_SINGLE, ProjectType.RESIDENTIAL_MULTI)


# =============================================================================
# Parties and Roles
# =============================================================================

class ContractParty(str, Enum):
    """Who the claimant contracted with directly."""
    OWNER = "owner"
    GENERAL_CONTRACTOR = "generalContractor"
    SUBCONTRACTOR = "subcontractor"
    PROPERTY_MANAGER = "propertyManager"
    UNKNOWN = "unknown"


class RoleTier(str, Enum):
    """
    Contractual tier of the claimant.

    Selects which statutory filing formula applies.
    """
    ORIGINAL_CONTRACTOR = "originalContractor"   # Contracted with the owner
    SUBCONTRACTOR_TIER = "subcontractorTier"     # Everyone else


# =============================================================================
# Risk Factors
# =============================================================================

class ContractStrength(str, Enum):
    """Form of the agreement the claimant can produce."""
    WRITTEN_SIGNED = "written-signed"
    PURCHASE_ORDER = "purchaseOrder"
    VERBAL_ONLY = "verbalOnly"
    NONE = "none"

    @property
    def is_weak(self) -> bool:
        """Verbal or no agreement weakens the claim."""
        return self in (ContractStrength.VERBAL_ONLY, ContractStrength.NONE)


class PreliminaryNoticeStatus(str, Enum):
    """Whether the statutory preliminary notice went out on time."""
    SENT_ON_TIME = "sentOnTime"
    SENT_LATE = "sentLate"
    NOT_SENT_YET = "notSentYet"
    NOT_SENT_PAST_DEADLINE = "notSentPastDeadline"
    UNKNOWN = "unknown"


class PaymentDemandStatus(str, Enum):
    """Formal demands for payment made so far."""
    MULTIPLE_WRITTEN_DEMANDS = "multipleWrittenDemands"
    ONE_WRITTEN_DEMAND = "oneWrittenDemand"
    VERBAL_ONLY = "verbalOnly"
    NONE = "none"


# =============================================================================
# Validity
# =============================================================================

class ValidityLevel(str, Enum):
    """
    Qualitative strength of a lien claim.

    Ordered: EXPIRED < WEAK < MODERATE < STRONG. UNKNOWN means the claim
    could not be rated yet and sits outside the ordering.
    """
    EXPIRED = "expired"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    UNKNOWN = "unknown"

    @property
    def is_rated(self) -> bool:
        return self is not ValidityLevel.UNKNOWN

    @property
    def rank(self) -> Optional[int]:
        return _VALIDITY_RANK.get(self)

    def _comparable(self, other: object) -> bool:
        return isinstance(other, ValidityLevel) and self.is_rated and other.is_rated

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.rank >= other.rank


_VALIDITY_RANK = {
    ValidityLevel.EXPIRED: 0,
    ValidityLevel.WEAK: 1,
    ValidityLevel.MODERATE: 2,
    ValidityLevel.STRONG: 3,
}


# =============================================================================
# Deadline Schedule
# =============================================================================

class DeadlineType(str, Enum):
    """Kinds of statutory and recommended deadlines."""
    PRELIMINARY_NOTICE = "preliminary_notice"
    MONTHLY_NOTICE = "monthly_notice"
    RETAINAGE_NOTICE = "retainage_notice"
    MECHANICS_LIEN = "mechanics_lien"
    BOND_CLAIM = "bond_claim"
    PAYMENT_DEMAND = "payment_demand"
    LAWSUIT_FILING = "lawsuit_filing"


class DeadlineSeverity(str, Enum):
    """How loudly a deadline should be surfaced."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DeadlineStatus(str, Enum):
    """Status of a scheduled deadline relative to the evaluation date."""
    UPCOMING = "upcoming"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"
    COMPLETED = "completed"


# =============================================================================
# Kits
# =============================================================================

class KitCategory(str, Enum):
    """Document kit families offered to claimants."""
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    SUBCONTRACTOR = "subcontractor"
    SPECIALTY = "specialty"
    PRELIMINARY_NOTICE = "preliminary-notice"
    BOND_CLAIM = "bond-claim"
    RELEASE_OF_LIEN = "release-of-lien"
    PAYMENT_DEMAND = "payment-demand"
