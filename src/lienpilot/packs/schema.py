"""
LienPilot Rule Pack Schemas

Pydantic models for validating statute rule pack YAML/JSON files.

These schemas define the structure of rule packs loaded at runtime.
They map to the StatuteRules domain model in lienpilot.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


DeadlineTypeValue = Literal[
    "preliminary_notice", "monthly_notice", "retainage_notice",
    "mechanics_lien", "bond_claim", "payment_demand", "lawsuit_filing",
]


# =============================================================================
# Section Schemas
# =============================================================================

class LienFilingSchema(BaseModel):
    """Mechanics lien filing deadline rule."""
    original_contractor_months: int = Field(..., ge=1, le=12)
    subcontractor_months: int = Field(..., ge=1, le=12)
    day_of_month: int = Field(15, ge=1, le=28, description="Forced day of the filing month")
    urgent_window_days: int = Field(30, ge=1)

    @model_validator(mode="after")
    def original_contractor_gets_more_runway(self) -> "LienFilingSchema":
        if self.original_contractor_months < self.subcontractor_months:
            raise ValueError(
                "original_contractor_months must not be shorter than subcontractor_months"
            )
        return self


class PreliminaryNoticeSchema(BaseModel):
    """Preliminary (fund trapping) notice rule."""
    months_after_first_furnishing: int = Field(1, ge=0, le=12)
    day_of_month: int = Field(15, ge=1, le=28)
    warning_days: int = Field(7, ge=0)


class BondClaimSchema(BaseModel):
    """Payment bond claim rule for public projects."""
    original_contractor_days: int = Field(90, ge=1)
    subcontractor_days: int = Field(60, ge=1)
    warning_days: int = Field(14, ge=0)


class WarningDaysSchema(BaseModel):
    """Severity bands, in days before a due date."""
    critical: int = Field(7, ge=0)
    high: int = Field(14, ge=0)
    medium: int = Field(30, ge=0)

    @model_validator(mode="after")
    def bands_ascend(self) -> "WarningDaysSchema":
        if not (self.critical <= self.high <= self.medium):
            raise ValueError("warning bands must satisfy critical <= high <= medium")
        return self


# =============================================================================
# Rule Pack Schema
# =============================================================================

class RulePackSchema(BaseModel):
    """Top-level schema for a statute rule pack."""
    schema_version: str = Field(SCHEMA_VERSION)
    id: str = Field(..., description="Rule pack identifier")
    name: str = Field(..., description="Human-readable name")
    jurisdiction: str = Field(..., description="Jurisdiction code, e.g. US-TX")
    version: str = Field(..., description="Pack content version")

    lien_filing: LienFilingSchema
    preliminary_notice: PreliminaryNoticeSchema = Field(default_factory=PreliminaryNoticeSchema)
    retainage_notice_days_before_lien: int = Field(30, ge=0)
    bond_claim: BondClaimSchema = Field(default_factory=BondClaimSchema)
    lawsuit_months_after_lien: int = Field(24, ge=1)
    payment_demand_days: int = Field(10, ge=0)
    warning_days: WarningDaysSchema = Field(default_factory=WarningDaysSchema)

    legal_references: dict[DeadlineTypeValue, str] = Field(default_factory=dict)


def validate_rule_pack(data: dict[str, Any]) -> RulePackSchema:
    """
    Validate a rule pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RulePackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check if a rule pack's schema major version is compatible."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
