"""
LienPilot Role Classifier

Maps the contract party answer to the claimant's statutory tier.
Only a contract made directly with the owner earns the original
contractor's longer filing window; every other party, including an
unknown one, is classified into the subcontractor tier.
"""
from __future__ import annotations

import logging
from typing import Any

from ..exceptions import ConfigurationError
from ..models import ContractParty, RoleClassification, RoleTier

logger = logging.getLogger(__name__)


_TIER_BY_PARTY: dict[ContractParty, RoleTier] = {
    ContractParty.OWNER: RoleTier.ORIGINAL_CONTRACTOR,
    ContractParty.GENERAL_CONTRACTOR: RoleTier.SUBCONTRACTOR_TIER,
    ContractParty.SUBCONTRACTOR: RoleTier.SUBCONTRACTOR_TIER,
    ContractParty.PROPERTY_MANAGER: RoleTier.SUBCONTRACTOR_TIER,
    ContractParty.UNKNOWN: RoleTier.SUBCONTRACTOR_TIER,
}


def classify(contract_party: Any) -> RoleClassification:
    """
    Classify a contract party into a statutory tier.

    Args:
        contract_party: A ContractParty (or its canonical string value)

    Returns:
        RoleClassification

    Raises:
        ConfigurationError: If the value is not a known contract party.
            Normalized input can never trigger this.
    """
    try:
        party = ContractParty(contract_party)
    except ValueError:
        logger.error("Unclassifiable contract party %r reached the role classifier", contract_party)
        raise ConfigurationError(
            message=f"Unknown contract party: {contract_party!r}",
            details={"contract_party": repr(contract_party)},
        )

    tier = _TIER_BY_PARTY.get(party, RoleTier.SUBCONTRACTOR_TIER)
    return RoleClassification(tier=tier, contract_party=party)
