"""Assessment report endpoint."""

from datetime import date

from fastapi import APIRouter, Request

from api.report_builder import build_report_data
from api.schemas.requests import ReportRequest
from api.schemas.responses import ReportResponse
from lienpilot.engine import LienEngine

router = APIRouter(prefix="/report", tags=["Report"])

# Shared engine instance
engine: LienEngine = LienEngine()


def set_engine(e: LienEngine):
    global engine
    engine = e


@router.post("", response_model=ReportResponse)
async def build_report(body: ReportRequest, request: Request):
    """
    Evaluate answers and return display data for the assessment PDF.

    The PDF renderer draws exactly what is returned here; it never
    recalculates dates or ratings.
    """
    today = body.today or date.today()
    result = engine.evaluate(body.answers, today, partial=body.partial)

    return ReportResponse(
        request_id=getattr(request.state, "request_id", "unknown"),
        report=build_report_data(result, body.contact.model_dump(), generated_on=today),
    )
