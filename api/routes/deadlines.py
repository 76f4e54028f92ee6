"""Statutory deadline schedule endpoint."""

from datetime import date, datetime, timezone

from fastapi import APIRouter, Request

from api.schemas.requests import EvaluateRequest
from api.schemas.responses import DeadlinesResponse, ScheduledDeadlineOut
from lienpilot.engine import LienEngine, deadlines_needing_reminders, format_deadline

router = APIRouter(prefix="/deadlines", tags=["Deadlines"])

# Shared engine instance
engine: LienEngine = LienEngine()


def set_engine(e: LienEngine):
    global engine
    engine = e


@router.post("", response_model=DeadlinesResponse)
async def list_deadlines(body: EvaluateRequest, request: Request):
    """
    Build the full deadline schedule for a project.

    Includes preliminary and monthly notices, retainage notice, the lien
    filing itself, bond claims for public work, foreclosure and the
    payment demand, each with status and severity as of `today`.
    """
    today = body.today or date.today()
    schedule = engine.schedule(body.answers, today, partial=body.partial)

    return DeadlinesResponse(
        request_id=getattr(request.state, "request_id", "unknown"),
        evaluated_at=datetime.now(timezone.utc).isoformat(),
        deadlines=[
            ScheduledDeadlineOut(**item.to_dict(), label=format_deadline(item, today))
            for item in schedule
        ],
        reminders=[item.title for item in deadlines_needing_reminders(schedule, today)],
        rules_version=engine.rules.version,
    )
