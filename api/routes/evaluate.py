"""Lien evaluation endpoint."""

import logging
import time
from datetime import date, datetime, timezone

from fastapi import APIRouter, Request

from api.schemas.requests import EvaluateRequest
from api.schemas.responses import EvaluateResponse
from lienpilot.engine import LienEngine
import lienpilot

router = APIRouter(prefix="/evaluate", tags=["Evaluation"])

logger = logging.getLogger("lienpilot.api")

# Shared engine instance
engine: LienEngine = LienEngine()


def set_engine(e: LienEngine):
    global engine
    engine = e


@router.post("", response_model=EvaluateResponse)
async def evaluate_answers(body: EvaluateRequest, request: Request):
    """
    Evaluate questionnaire answers.

    Returns the filing deadline, claim validity, the ordered action plan
    and the recommended kit track. Invalid answers produce a 422 listing
    every offending field.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    start_time = time.time()

    result = engine.evaluate(body.answers, body.today or date.today(), partial=body.partial)
    payload = result.to_dict()

    logger.info(
        "Evaluation complete",
        extra={
            "request_id": request_id,
            "validity": result.validity.level.value,
            "days_remaining": result.deadline.days_remaining,
            "duration_ms": int((time.time() - start_time) * 1000),
        },
    )

    return EvaluateResponse(
        request_id=request_id,
        deadline=payload["deadline"],
        validity=payload["validity"],
        recommendations=payload["recommendations"],
        kit_track=payload["kit_track"],
        role_tier=payload["role_tier"],
        evaluated_at=datetime.now(timezone.utc).isoformat(),
        engine_version=lienpilot.__version__,
        rules_version=engine.rules.version,
    )
