"""
Unit tests for LienPilot models.

Tests cover:
- Enum helpers and validity ordering
- ProjectAssessment invariants
- DeadlineResult and ScheduledDeadline serialization
- Exception payloads
"""
import pytest
from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

from lienpilot.exceptions import (
    ConfigurationError,
    FieldError,
    LienPilotError,
    ValidationError,
)
from lienpilot.models import (
    DEFAULT_RULES,
    UNKNOWN_DEADLINE,
    ContractParty,
    ContractStrength,
    DeadlineResult,
    DeadlineStatus,
    DeadlineType,
    ProjectType,
    RoleTier,
    ScheduledDeadline,
    ValidityLevel,
)

from tests.conftest import make_assessment


# =============================================================================
# Enum Tests
# =============================================================================

class TestEnums:
    """Tests for enum helpers."""

    def test_residential_project_types(self):
        assert ProjectType.RESIDENTIAL_SINGLE.is_residential
        assert ProjectType.RESIDENTIAL_MULTI.is_residential
        assert not ProjectType.COMMERCIAL.is_residential
        assert not ProjectType.PUBLIC.is_residential

    def test_weak_contract_strengths(self):
        assert ContractStrength.VERBAL_ONLY.is_weak
        assert ContractStrength.NONE.is_weak
        assert not ContractStrength.WRITTEN_SIGNED.is_weak
        assert not ContractStrength.PURCHASE_ORDER.is_weak

    def test_validity_ordering(self):
        """Levels order from expired (worst) to strong (best)."""
        ordered = sorted([
            ValidityLevel.STRONG,
            ValidityLevel.EXPIRED,
            ValidityLevel.MODERATE,
            ValidityLevel.WEAK,
        ])
        assert ordered == [
            ValidityLevel.EXPIRED,
            ValidityLevel.WEAK,
            ValidityLevel.MODERATE,
            ValidityLevel.STRONG,
        ]
        assert ValidityLevel.WEAK < ValidityLevel.MODERATE
        assert ValidityLevel.STRONG >= ValidityLevel.STRONG

    def test_unknown_validity_is_unranked(self):
        assert not ValidityLevel.UNKNOWN.is_rated
        assert ValidityLevel.UNKNOWN.rank is None
        with pytest.raises(TypeError):
            ValidityLevel.UNKNOWN < ValidityLevel.WEAK

    def test_enum_values_are_wire_strings(self):
        assert ContractParty.GENERAL_CONTRACTOR.value == "generalContractor"
        assert RoleTier.SUBCONTRACTOR_TIER.value == "subcontractorTier"
        assert ContractStrength.WRITTEN_SIGNED.value == "written-signed"


# =============================================================================
# Assessment Tests
# =============================================================================

class TestProjectAssessment:
    """Tests for ProjectAssessment invariants."""

    def test_assessment_is_frozen(self):
        assessment = make_assessment()
        with pytest.raises(FrozenInstanceError):
            assessment.amount_owed = Decimal("1")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            make_assessment(amount_owed=Decimal("-1"))

    def test_last_work_before_start_rejected(self):
        with pytest.raises(ValueError):
            make_assessment(
                work_start_date=date(2024, 2, 1),
                last_work_date=date(2024, 1, 1),
            )

    def test_unknown_last_work_date_allowed(self):
        assessment = make_assessment(last_work_date=None)
        assert assessment.last_work_date is None

    def test_to_dict(self):
        data = make_assessment().to_dict()
        assert data["contract_party"] == "generalContractor"
        assert data["last_work_date"] == "2024-01-20"
        assert data["amount_owed"] == "12500"


# =============================================================================
# Deadline Model Tests
# =============================================================================

class TestDeadlineModels:
    """Tests for deadline models."""

    def test_unknown_deadline_defaults(self):
        assert UNKNOWN_DEADLINE.deadline_date is None
        assert UNKNOWN_DEADLINE.days_remaining is None
        assert not UNKNOWN_DEADLINE.is_known
        assert not UNKNOWN_DEADLINE.can_file_lien
        assert UNKNOWN_DEADLINE.days_overdue == 0

    def test_days_overdue(self):
        result = DeadlineResult(
            deadline_date=date(2024, 1, 15),
            days_remaining=-17,
            is_past_deadline=True,
        )
        assert result.days_overdue == 17

    def test_deadline_to_dict(self):
        result = DeadlineResult(
            deadline_date=date(2024, 3, 15),
            days_remaining=44,
            can_file_lien=True,
        )
        assert result.to_dict() == {
            "deadline_date": "2024-03-15",
            "days_remaining": 44,
            "is_past_deadline": False,
            "is_urgent": False,
            "can_file_lien": True,
        }

    def test_scheduled_deadline_with_status(self):
        item = ScheduledDeadline(
            type=DeadlineType.MECHANICS_LIEN,
            title="File Mechanics Lien",
            description="",
            due_date=date(2024, 3, 15),
        )
        done = item.with_status(DeadlineStatus.COMPLETED)
        assert done.status == DeadlineStatus.COMPLETED
        assert item.status == DeadlineStatus.UPCOMING
        assert done.key == item.key == ("mechanics_lien", "File Mechanics Lien")


# =============================================================================
# Rules Tests
# =============================================================================

class TestStatuteRules:
    """Tests for the default statute rules."""

    def test_months_per_tier(self):
        assert DEFAULT_RULES.months_for(RoleTier.ORIGINAL_CONTRACTOR) == 3
        assert DEFAULT_RULES.months_for(RoleTier.SUBCONTRACTOR_TIER) == 2

    def test_bond_claim_days_per_tier(self):
        assert DEFAULT_RULES.bond_claim_days_for(RoleTier.ORIGINAL_CONTRACTOR) == 90
        assert DEFAULT_RULES.bond_claim_days_for(RoleTier.SUBCONTRACTOR_TIER) == 60

    def test_legal_reference(self):
        assert DEFAULT_RULES.legal_reference(DeadlineType.MECHANICS_LIEN) == (
            "Texas Property Code § 53.052"
        )


# =============================================================================
# Exception Tests
# =============================================================================

class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_validation_error_payload(self):
        error = ValidationError(
            message="2 invalid or missing answer(s)",
            errors=[
                FieldError(field="contract_party", message="This field is required"),
                FieldError(field="amount_owed", message="Expected a dollar amount", value="abc"),
            ],
        )
        payload = error.to_dict()
        assert payload["code"] == "LP_VALIDATION_ERROR"
        assert error.fields == ["contract_party", "amount_owed"]
        assert payload["errors"][1] == {
            "field": "amount_owed",
            "message": "Expected a dollar amount",
            "value": "abc",
        }

    def test_hierarchy(self):
        assert issubclass(ValidationError, LienPilotError)
        assert issubclass(ConfigurationError, LienPilotError)

    def test_str_includes_code(self):
        error = ConfigurationError(message="Unknown contract party: 'x'")
        assert str(error) == "[LP_CONFIGURATION_ERROR] Unknown contract party: 'x'"
