"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Optional


class DeadlineOut(BaseModel):
    """Controlling lien filing deadline."""
    deadline_date: Optional[str] = None
    days_remaining: Optional[int] = None
    is_past_deadline: bool
    is_urgent: bool
    can_file_lien: bool


class ValidityOut(BaseModel):
    level: str  # strong|moderate|weak|expired|unknown


class KitTrackOut(BaseModel):
    """Document kit families that fit the situation."""
    primary: str
    secondary: list[str]
    reason: str
    required_documents: list[str]


class EvaluateResponse(BaseModel):
    """Response from lien evaluation."""
    request_id: str
    deadline: DeadlineOut
    validity: ValidityOut
    recommendations: list[str]
    kit_track: KitTrackOut
    role_tier: str  # originalContractor|subcontractorTier

    # Provenance
    evaluated_at: str
    engine_version: str
    rules_version: str


class ScheduledDeadlineOut(BaseModel):
    """One entry of the statutory schedule."""
    type: str
    title: str
    description: str
    due_date: str
    label: str
    severity: str  # critical|high|medium|low
    status: str  # upcoming|due_soon|overdue|completed
    is_optional: bool
    legal_reference: str
    action_items: list[str]


class DeadlinesResponse(BaseModel):
    """Full statutory deadline schedule."""
    request_id: str
    evaluated_at: str
    deadlines: list[ScheduledDeadlineOut]
    reminders: list[str]  # titles due within the reminder window
    rules_version: str


class ReportResponse(BaseModel):
    """PDF report display data."""
    request_id: str
    report: dict


class RulesResponse(BaseModel):
    """Active statute rule pack."""
    id: str
    name: str
    jurisdiction: str
    version: str
    rules: dict


class HealthResponse(BaseModel):
    status: str
    version: str
    rules_loaded: bool
