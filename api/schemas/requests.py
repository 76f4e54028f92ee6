"""Request schemas for the API."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field


class EvaluateRequest(BaseModel):
    """Questionnaire answers to evaluate."""
    answers: dict[str, Any] = Field(
        ...,
        description="Field id -> answer. Canonical values or questionnaire labels.",
    )
    today: Optional[date] = Field(
        default=None,
        description="Evaluation date (ISO format: YYYY-MM-DD). Defaults to the server date.",
    )
    partial: bool = Field(
        default=False,
        description="Accept an in-progress assessment with required answers missing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "answers": {
                        "project_type": "Residential - single-family home",
                        "contract_party": "General contractor",
                        "work_start_date": "2023-11-01",
                        "last_work_date": "2024-01-20",
                        "amount_owed": "$12,500.00",
                        "written_contract": "Yes, signed written contract",
                        "preliminary_notice_sent": "Yes, within required timeframe",
                        "payment_attempts": "Yes, one written demand",
                    },
                    "today": "2024-02-01",
                }
            ]
        }
    }


class ContactInput(BaseModel):
    """Client contact details printed on the report."""
    first_name: str = Field(..., description="Client first name")
    last_name: str = Field(..., description="Client last name")
    email: str = Field(..., description="Client email")
    phone: Optional[str] = Field(default=None)
    additional_details: Optional[str] = Field(default=None)
    interested_in_attorney: bool = Field(default=False)


class ReportRequest(EvaluateRequest):
    """Answers plus contact details for the PDF report."""
    contact: ContactInput
