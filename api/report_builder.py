"""
Report Builder -- turns an engine result plus client contact details into
the display data the assessment PDF renders.

No FastAPI code here -- just the pure mapping from an EngineResult to a
report dict. Nothing is recomputed: every date, count and rating comes
from the result as the engine produced it.

Sections:
  1. Client information
  2. Project details (questionnaire wording)
  3. Assessment results (validity label, deadline line, status line)
  4. Available lien rights
  5. Numbered action plan
  6. Legal disclaimer
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from lienpilot.engine.normalizer import (
    CONTRACT_PARTY_LABELS,
    CONTRACT_STRENGTH_LABELS,
    PAYMENT_DEMAND_LABELS,
    PRELIMINARY_NOTICE_LABELS,
    PROJECT_TYPE_LABELS,
)
from lienpilot.models import (
    ContractParty,
    ContractStrength,
    EngineResult,
    PaymentDemandStatus,
    PreliminaryNoticeStatus,
    ProjectType,
    ValidityLevel,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

REPORT_TITLE = "Texas Mechanics Lien Assessment Report"

DISCLAIMER = (
    "This report provides general information about Texas mechanics lien laws "
    "and is not legal advice. The information is based on the details you "
    "provided and may not account for all circumstances affecting your lien "
    "rights. Mechanics lien laws are complex and vary by jurisdiction. For "
    "specific legal advice regarding your situation, please consult with a "
    "licensed attorney in Texas who specializes in construction law. Lien "
    "Professor is not a law firm and does not provide legal representation."
)

_VALIDITY_LABEL: dict[ValidityLevel, str] = {
    ValidityLevel.STRONG: "STRONG",
    ValidityLevel.MODERATE: "MODERATE",
    ValidityLevel.WEAK: "WEAK",
    ValidityLevel.EXPIRED: "EXPIRED",
    ValidityLevel.UNKNOWN: "NOT RATED",
}

STATUS_CAN_FILE = "Status: You can file a mechanics lien"
STATUS_CLOSED = "Status: Filing deadline has passed"
STATUS_UNKNOWN = "Status: Filing deadline not yet determined"

RIGHT_MECHANICS_LIEN = "Mechanics and Materialmen's Lien"
RIGHT_RETAINAGE_LIEN = "Constitutional Retainage Lien (if applicable)"
RIGHT_PRELIMINARY_NOTICE = "Notice to Owner/Preliminary Notice (send immediately)"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _first_labels(labels: Mapping[str, Any]) -> dict[Any, str]:
    """Reverse a label table, keeping the first label listed per value."""
    reverse: dict[Any, str] = {}
    for label, value in labels.items():
        reverse.setdefault(value, label)
    return reverse


# Keyed by enum class: several enums share wire values ("none", "unknown").
_DISPLAY_LABELS: dict[type, dict[Any, str]] = {
    ProjectType: _first_labels(PROJECT_TYPE_LABELS),
    ContractParty: _first_labels(CONTRACT_PARTY_LABELS),
    ContractStrength: _first_labels(CONTRACT_STRENGTH_LABELS),
    PreliminaryNoticeStatus: _first_labels(PRELIMINARY_NOTICE_LABELS),
    PaymentDemandStatus: _first_labels(PAYMENT_DEMAND_LABELS),
}


def _label(value: Any) -> str:
    labels = _DISPLAY_LABELS.get(type(value), {})
    return labels.get(value, str(getattr(value, "value", value)))


def _display_date(value: Optional[date]) -> str:
    if value is None:
        return "Not provided"
    return f"{value.month}/{value.day}/{value.year}"


def status_line(result: EngineResult) -> str:
    deadline = result.deadline
    if not deadline.is_known:
        return STATUS_UNKNOWN
    return STATUS_CAN_FILE if deadline.can_file_lien else STATUS_CLOSED


def deadline_line(result: EngineResult) -> Optional[str]:
    """'Filing Deadline: ...' or 'Deadline Passed: ...', None when unknown."""
    deadline = result.deadline
    if not deadline.is_known:
        return None
    shown = _display_date(deadline.deadline_date)
    if deadline.is_past_deadline:
        return f"Deadline Passed: {shown} ({deadline.days_overdue} days overdue)"
    return f"Filing Deadline: {shown} ({deadline.days_remaining} days remaining)"


def available_lien_rights(result: EngineResult) -> list[str]:
    """Lien rights still open to the claimant (empty once filing is closed)."""
    if not result.deadline.can_file_lien:
        return []

    assessment = result.assessment
    rights = [RIGHT_MECHANICS_LIEN]
    if assessment.contract_party != ContractParty.OWNER:
        rights.append(RIGHT_RETAINAGE_LIEN)
    if assessment.preliminary_notice_status == PreliminaryNoticeStatus.NOT_SENT_YET:
        rights.append(RIGHT_PRELIMINARY_NOTICE)
    return rights


def report_filename(contact: Mapping[str, Any], generated_on: date) -> str:
    first = str(contact.get("first_name", "")).strip()
    last = str(contact.get("last_name", "")).strip()
    return f"LienProfessor_Assessment_{first}_{last}_{generated_on.isoformat()}.pdf"


# ---------------------------------------------------------------------------
# Main builder
# ---------------------------------------------------------------------------

def build_report_data(
    result: EngineResult,
    contact: Mapping[str, Any],
    generated_on: Optional[date] = None,
) -> dict[str, Any]:
    """
    Build the PDF display data for one assessment.

    Args:
        result: Engine output for the assessment
        contact: first_name, last_name, email and optionally phone,
            additional_details and interested_in_attorney
        generated_on: Report date (defaults to today)

    Returns:
        Dict with client, project, results, lien_rights, action_plan,
        disclaimer and filename keys
    """
    generated_on = generated_on or date.today()
    assessment = result.assessment

    client: dict[str, Any] = {
        "name": f"{contact.get('first_name', '')} {contact.get('last_name', '')}".strip(),
        "email": contact.get("email", ""),
    }
    if contact.get("phone"):
        client["phone"] = contact["phone"]

    project = {
        "project_type": _label(assessment.project_type),
        "contract_party": _label(assessment.contract_party),
        "work_start_date": _display_date(assessment.work_start_date),
        "last_work_date": _display_date(assessment.last_work_date),
        "amount_owed": f"${assessment.amount_owed:,.2f}",
        "written_contract": _label(assessment.written_contract),
        "preliminary_notice": _label(assessment.preliminary_notice_status),
        "payment_attempts": _label(assessment.payment_demand_status),
    }
    if contact.get("additional_details"):
        project["additional_details"] = contact["additional_details"]

    results = {
        "validity_label": f"Lien Claim Validity: {_VALIDITY_LABEL[result.validity.level]}",
        "validity": result.validity.level.value,
        "deadline_line": deadline_line(result),
        "status_line": status_line(result),
        "is_urgent": result.deadline.is_urgent,
        "is_past_deadline": result.deadline.is_past_deadline,
    }

    return {
        "title": REPORT_TITLE,
        "generated_on": generated_on.isoformat(),
        "client": client,
        "project": project,
        "results": results,
        "lien_rights": available_lien_rights(result),
        "action_plan": [
            f"{index}. {text}"
            for index, text in enumerate(result.recommendations, start=1)
        ],
        "interested_in_attorney": bool(contact.get("interested_in_attorney", False)),
        "disclaimer": DISCLAIMER,
        "filename": report_filename(contact, generated_on),
    }


# ---------------------------------------------------------------------------
# Exports
# ---------------------------------------------------------------------------

__all__ = [
    "build_report_data",
    "deadline_line",
    "status_line",
    "available_lien_rights",
    "report_filename",
    "DISCLAIMER",
]
