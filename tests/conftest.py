"""
Pytest configuration and fixtures for LienPilot tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from lienpilot.models import (
    ContractParty,
    ContractStrength,
    PaymentDemandStatus,
    PreliminaryNoticeStatus,
    ProjectAssessment,
    ProjectType,
)


# Evaluation date used across the suite
TODAY = date(2024, 2, 1)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_answers(**overrides: Any) -> dict[str, Any]:
    """
    Raw questionnaire answers for a strong subcontractor-tier claim.

    Pass a value of None to drop a field entirely.
    """
    answers: dict[str, Any] = {
        "project_type": "commercial",
        "contract_party": "generalContractor",
        "work_start_date": "2023-11-01",
        "last_work_date": "2024-01-20",
        "amount_owed": "12500",
        "written_contract": "written-signed",
        "preliminary_notice_sent": "sentOnTime",
        "payment_attempts": "oneWrittenDemand",
    }
    answers.update(overrides)
    return {k: v for k, v in answers.items() if v is not None}


def make_assessment(
    contract_party: ContractParty = ContractParty.GENERAL_CONTRACTOR,
    last_work_date: Optional[date] = date(2024, 1, 20),
    project_type: ProjectType = ProjectType.COMMERCIAL,
    work_start_date: Optional[date] = date(2023, 11, 1),
    amount_owed: Decimal = Decimal("12500"),
    written_contract: ContractStrength = ContractStrength.WRITTEN_SIGNED,
    preliminary_notice_status: PreliminaryNoticeStatus = PreliminaryNoticeStatus.SENT_ON_TIME,
    payment_demand_status: PaymentDemandStatus = PaymentDemandStatus.ONE_WRITTEN_DEMAND,
    has_existing_lien: bool = False,
    retainage_amount: Decimal = Decimal("0"),
) -> ProjectAssessment:
    """Create a ProjectAssessment with strong-claim defaults."""
    return ProjectAssessment(
        contract_party=contract_party,
        last_work_date=last_work_date,
        project_type=project_type,
        work_start_date=work_start_date,
        amount_owed=amount_owed,
        written_contract=written_contract,
        preliminary_notice_status=preliminary_notice_status,
        payment_demand_status=payment_demand_status,
        has_existing_lien=has_existing_lien,
        retainage_amount=retainage_amount,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def today() -> date:
    """Pinned evaluation date."""
    return TODAY


@pytest.fixture
def strong_answers() -> dict[str, Any]:
    return make_answers()


@pytest.fixture
def questionnaire_answers() -> dict[str, Any]:
    """Answers exactly as the questionnaire submits them (labels, camelCase)."""
    return {
        "projectType": "Residential - single-family home",
        "contractParty": "Property owner directly",
        "workStartDate": "2023-10-02",
        "lastWorkDate": "2023-12-28",
        "amountOwed": "$18,250.00",
        "writtenContract": "Verbal agreement only",
        "preliminaryNoticeSent": "No, but I plan to send them",
        "paymentAttempts": "Haven't requested payment yet",
        "firstName": "Dana",
        "email": "dana@example.com",
    }
