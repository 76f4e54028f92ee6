"""Statute rule pack endpoint."""

from fastapi import APIRouter

from api.schemas.responses import RulesResponse
from lienpilot.models import DEFAULT_RULES, StatuteRules

router = APIRouter(prefix="/rules", tags=["Rules"])

rules: StatuteRules = DEFAULT_RULES


def set_rules(r: StatuteRules):
    global rules
    rules = r


@router.get("", response_model=RulesResponse)
async def get_rules():
    """Summary of the statute rule pack in use."""
    return RulesResponse(
        id=rules.id,
        name=rules.name,
        jurisdiction=rules.jurisdiction,
        version=rules.version,
        rules=rules.to_dict(),
    )
