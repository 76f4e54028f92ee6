"""
LienPilot Input Normalizer

Validates and coerces raw questionnaire answers into a ProjectAssessment.

Key features:
- Accepts canonical enum tokens and the questionnaire's option labels
- Accepts snake_case and camelCase field ids
- Collects every field error before failing (never stops at the first)
- Partial mode for in-progress assessments (required fields may be absent)
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

from ..exceptions import FieldError, ValidationError
from ..models import (
    ContractParty,
    ContractStrength,
    PaymentDemandStatus,
    PreliminaryNoticeStatus,
    ProjectAssessment,
    ProjectType,
)

E = TypeVar("E", bound=Enum)


# =============================================================================
# Field Ids
# =============================================================================

# Canonical field id -> accepted aliases (first present, non-blank wins)
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "project_type": ("project_type", "projectType"),
    "contract_party": ("contract_party", "contractParty"),
    "work_start_date": ("work_start_date", "workStartDate"),
    "last_work_date": ("last_work_date", "lastWorkDate"),
    "amount_owed": ("amount_owed", "amountOwed"),
    "written_contract": ("written_contract", "writtenContract", "hasWrittenContract"),
    "preliminary_notice_sent": (
        "preliminary_notice_sent",
        "preliminary_notice_status",
        "preliminaryNoticeSent",
        "preliminaryNoticeStatus",
    ),
    "payment_attempts": (
        "payment_attempts",
        "payment_demand_status",
        "paymentAttempts",
        "paymentDemandStatus",
    ),
    "has_existing_lien": ("has_existing_lien", "hasExistingLien"),
    "retainage_amount": ("retainage_amount", "retainageAmount", "retained_amount"),
}

REQUIRED_FIELDS = ("contract_party", "last_work_date")


# =============================================================================
# Questionnaire Labels
# =============================================================================

PROJECT_TYPE_LABELS: dict[str, ProjectType] = {
    "Residential - single-family home": ProjectType.RESIDENTIAL_SINGLE,
    "Residential - multi-family/apartment": ProjectType.RESIDENTIAL_MULTI,
    "Commercial building": ProjectType.COMMERCIAL,
    "Industrial facility": ProjectType.INDUSTRIAL,
    "Public infrastructure (roads, bridges, etc.)": ProjectType.PUBLIC,
    "Government building": ProjectType.PUBLIC,
    "Public/government project": ProjectType.PUBLIC,
    "Other": ProjectType.OTHER,
}

CONTRACT_PARTY_LABELS: dict[str, ContractParty] = {
    "Property owner directly": ContractParty.OWNER,
    "Property owner": ContractParty.OWNER,
    "General contractor": ContractParty.GENERAL_CONTRACTOR,
    "Another subcontractor": ContractParty.SUBCONTRACTOR,
    "Property management company": ContractParty.PROPERTY_MANAGER,
    # Public-agency contracts fall back to the stricter tier
    "Government agency": ContractParty.UNKNOWN,
    "Not sure": ContractParty.UNKNOWN,
}

CONTRACT_STRENGTH_LABELS: dict[str, ContractStrength] = {
    "Yes, signed written contract": ContractStrength.WRITTEN_SIGNED,
    "Purchase order or work order": ContractStrength.PURCHASE_ORDER,
    "Email or text confirmation": ContractStrength.PURCHASE_ORDER,
    "Verbal agreement only": ContractStrength.VERBAL_ONLY,
    "No formal agreement": ContractStrength.NONE,
    "Yes": ContractStrength.WRITTEN_SIGNED,
    "No": ContractStrength.NONE,
}

PRELIMINARY_NOTICE_LABELS: dict[str, PreliminaryNoticeStatus] = {
    "Yes, sent within required timeframes": PreliminaryNoticeStatus.SENT_ON_TIME,
    "Yes, within required timeframe": PreliminaryNoticeStatus.SENT_ON_TIME,
    "Yes, but might be late": PreliminaryNoticeStatus.SENT_LATE,
    "No, but I plan to send them": PreliminaryNoticeStatus.NOT_SENT_YET,
    "No, but I want to": PreliminaryNoticeStatus.NOT_SENT_YET,
    "No, and deadlines may have passed": PreliminaryNoticeStatus.NOT_SENT_PAST_DEADLINE,
    "No, and I'm past deadlines": PreliminaryNoticeStatus.NOT_SENT_PAST_DEADLINE,
    "Not sure what notices are required": PreliminaryNoticeStatus.UNKNOWN,
}

PAYMENT_DEMAND_LABELS: dict[str, PaymentDemandStatus] = {
    "Yes, multiple written demands": PaymentDemandStatus.MULTIPLE_WRITTEN_DEMANDS,
    "Yes, one written demand": PaymentDemandStatus.ONE_WRITTEN_DEMAND,
    "Only verbal requests": PaymentDemandStatus.VERBAL_ONLY,
    "Haven't requested payment yet": PaymentDemandStatus.NONE,
    "Haven't requested yet": PaymentDemandStatus.NONE,
}

_TRUE_TOKENS = frozenset({"true", "yes", "y", "1", "on"})
_FALSE_TOKENS = frozenset({"false", "no", "n", "0", "off"})


def _token(text: str) -> str:
    """Case/punctuation-insensitive lookup key."""
    return re.sub(r"[^a-z0-9]", "", text.lower())


def _build_lookup(enum_cls: type[E], labels: Mapping[str, E]) -> dict[str, E]:
    lookup: dict[str, E] = {}
    for member in enum_cls:
        lookup[_token(member.value)] = member
        lookup[_token(member.name)] = member
    for label, member in labels.items():
        lookup[_token(label)] = member
    return lookup


# =============================================================================
# Normalizer
# =============================================================================

@dataclass
class AnswerNormalizer:
    """
    Turns raw answers into a ProjectAssessment.

    Usage:
        normalizer = AnswerNormalizer()
        assessment = normalizer.normalize({
            "contract_party": "Property owner directly",
            "last_work_date": "2024-01-20",
        })
    """

    _lookups: dict[type, dict[str, Any]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._lookups = {
            ProjectType: _build_lookup(ProjectType, PROJECT_TYPE_LABELS),
            ContractParty: _build_lookup(ContractParty, CONTRACT_PARTY_LABELS),
            ContractStrength: _build_lookup(ContractStrength, CONTRACT_STRENGTH_LABELS),
            PreliminaryNoticeStatus: _build_lookup(
                PreliminaryNoticeStatus, PRELIMINARY_NOTICE_LABELS
            ),
            PaymentDemandStatus: _build_lookup(PaymentDemandStatus, PAYMENT_DEMAND_LABELS),
        }

    def normalize(
        self,
        raw: Mapping[str, Any],
        partial: bool = False,
    ) -> ProjectAssessment:
        """
        Normalize raw answers.

        Args:
            raw: Field id -> raw value, as typed into form controls.
                Unrecognized ids (contact details etc.) are ignored.
            partial: Allow required fields to be absent (in-progress
                assessment). Malformed values are still errors.

        Returns:
            ProjectAssessment

        Raises:
            ValidationError: Listing every missing or malformed field
        """
        if not isinstance(raw, Mapping):
            raise ValidationError(
                message="Answers must be a mapping of field id to value",
                errors=[FieldError(field="answers", message="expected a mapping")],
            )

        errors: list[FieldError] = []

        if not partial:
            for name in REQUIRED_FIELDS:
                if _pick(raw, name) is None:
                    errors.append(FieldError(field=name, message="This field is required"))

        contract_party = self._parse_enum(
            raw, "contract_party", ContractParty, ContractParty.UNKNOWN, errors
        )
        project_type = self._parse_enum(
            raw, "project_type", ProjectType, ProjectType.OTHER, errors
        )
        written_contract = self._parse_enum(
            raw, "written_contract", ContractStrength, ContractStrength.NONE, errors
        )
        notice_status = self._parse_enum(
            raw,
            "preliminary_notice_sent",
            PreliminaryNoticeStatus,
            PreliminaryNoticeStatus.UNKNOWN,
            errors,
        )
        demand_status = self._parse_enum(
            raw, "payment_attempts", PaymentDemandStatus, PaymentDemandStatus.NONE, errors
        )

        work_start_date = _parse_date(raw, "work_start_date", errors)
        last_work_date = _parse_date(raw, "last_work_date", errors)
        if (
            work_start_date is not None
            and last_work_date is not None
            and last_work_date < work_start_date
        ):
            errors.append(FieldError(
                field="last_work_date",
                message="Last work date cannot be before the work start date",
                value=last_work_date.isoformat(),
            ))

        amount_owed = _parse_amount(raw, "amount_owed", errors)
        retainage_amount = _parse_amount(raw, "retainage_amount", errors)
        has_existing_lien = _parse_bool(raw, "has_existing_lien", errors)

        if errors:
            raise ValidationError(
                message=f"{len(errors)} invalid or missing answer(s)",
                errors=errors,
                details={"fields": [e.field for e in errors]},
            )

        return ProjectAssessment(
            contract_party=contract_party,
            last_work_date=last_work_date,
            project_type=project_type,
            work_start_date=work_start_date,
            amount_owed=amount_owed,
            written_contract=written_contract,
            preliminary_notice_status=notice_status,
            payment_demand_status=demand_status,
            has_existing_lien=has_existing_lien,
            retainage_amount=retainage_amount,
        )

    def _parse_enum(
        self,
        raw: Mapping[str, Any],
        name: str,
        enum_cls: type[E],
        default: E,
        errors: list[FieldError],
    ) -> E:
        value = _pick(raw, name)
        if value is None:
            return default
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, str):
            member = self._lookups[enum_cls].get(_token(value))
            if member is not None:
                return member
        allowed = ", ".join(m.value for m in enum_cls)
        errors.append(FieldError(
            field=name,
            message=f"Unrecognized answer; expected one of: {allowed}",
            value=value,
        ))
        return default


# =============================================================================
# Value Parsers
# =============================================================================

def _pick(raw: Mapping[str, Any], name: str) -> Optional[Any]:
    """First non-blank value among a field's aliases."""
    for alias in FIELD_ALIASES[name]:
        value = raw.get(alias)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _local_date(stamp: datetime) -> date:
    """Calendar day of a timestamp, read in the local timezone when it carries an offset."""
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone()
    return stamp.date()


def _parse_date(
    raw: Mapping[str, Any],
    name: str,
    errors: list[FieldError],
) -> Optional[date]:
    value = _pick(raw, name)
    if value is None:
        return None
    if isinstance(value, datetime):
        return _local_date(value)
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) > 10 and text[10] in "T ":
                return _local_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
            return date.fromisoformat(text)
        except ValueError:
            pass
    errors.append(FieldError(field=name, message="Expected a date (YYYY-MM-DD)", value=value))
    return None


def _parse_amount(
    raw: Mapping[str, Any],
    name: str,
    errors: list[FieldError],
) -> Decimal:
    value = _pick(raw, name)
    if value is None:
        return Decimal("0")

    amount: Optional[Decimal] = None
    if isinstance(value, bool):
        amount = None
    elif isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = value.strip().replace("$", "").replace(",", "").replace(" ", "")
        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            amount = None

    if amount is None or not amount.is_finite():
        errors.append(FieldError(field=name, message="Expected a dollar amount", value=value))
        return Decimal("0")
    if amount < 0:
        errors.append(FieldError(field=name, message="Amount cannot be negative", value=value))
        return Decimal("0")
    return amount


def _parse_bool(
    raw: Mapping[str, Any],
    name: str,
    errors: list[FieldError],
) -> bool:
    value = _pick(raw, name)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    errors.append(FieldError(field=name, message="Expected yes or no", value=value))
    return False


# =============================================================================
# Convenience Functions
# =============================================================================

_default_normalizer: Optional[AnswerNormalizer] = None


def normalize_answers(raw: Mapping[str, Any], partial: bool = False) -> ProjectAssessment:
    """
    Normalize raw answers with a shared normalizer.

    The normalizer holds only read-only lookup tables, so sharing it
    across concurrent callers is safe.
    """
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = AnswerNormalizer()
    return _default_normalizer.normalize(raw, partial=partial)
