"""
LienPilot Rule Pack Loader

Loads and validates statute rule packs from YAML or JSON files.

Converts Pydantic schema models to the StatuteRules domain model.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import RulePackLoadError, RulePackValidationError
from ..models import StatuteRules
from ..models.rules import DEFAULT_LEGAL_REFERENCES
from .schema import SCHEMA_VERSION, RulePackSchema, check_schema_version, validate_rule_pack

logger = logging.getLogger(__name__)

BUNDLED_PACK = Path(__file__).parent / "texas_property_code.yaml"


def _convert_rule_pack(schema: RulePackSchema) -> StatuteRules:
    """Convert RulePackSchema to StatuteRules model."""
    references = dict(DEFAULT_LEGAL_REFERENCES)
    references.update(schema.legal_references)

    return StatuteRules(
        id=schema.id,
        name=schema.name,
        jurisdiction=schema.jurisdiction,
        version=schema.version,
        original_contractor_months=schema.lien_filing.original_contractor_months,
        subcontractor_months=schema.lien_filing.subcontractor_months,
        filing_day_of_month=schema.lien_filing.day_of_month,
        urgent_window_days=schema.lien_filing.urgent_window_days,
        preliminary_notice_months=schema.preliminary_notice.months_after_first_furnishing,
        preliminary_notice_day_of_month=schema.preliminary_notice.day_of_month,
        preliminary_notice_warning_days=schema.preliminary_notice.warning_days,
        retainage_notice_days_before_lien=schema.retainage_notice_days_before_lien,
        bond_claim_original_contractor_days=schema.bond_claim.original_contractor_days,
        bond_claim_subcontractor_days=schema.bond_claim.subcontractor_days,
        bond_claim_warning_days=schema.bond_claim.warning_days,
        lawsuit_months_after_lien=schema.lawsuit_months_after_lien,
        payment_demand_days=schema.payment_demand_days,
        critical_warning_days=schema.warning_days.critical,
        high_warning_days=schema.warning_days.high,
        medium_warning_days=schema.warning_days.medium,
        legal_references=references,
    )


class RulePackLoader:
    """
    Loads statute rule packs from YAML or JSON files.

    Usage:
        loader = RulePackLoader()
        rules = loader.load("path/to/rules.yaml")
    """

    def __init__(self, strict_version: bool = True):
        self.strict_version = strict_version
        self._packs: dict[str, StatuteRules] = {}

    def load(self, path: Union[str, Path]) -> StatuteRules:
        """
        Load a rule pack from a file.

        Raises:
            RulePackLoadError: If the file cannot be read or parsed
            RulePackValidationError: If schema validation fails
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise RulePackLoadError(
                message=f"Failed to load rule pack: {e}",
                details={"path": str(path), "error": str(e)},
            )

        rules = self.load_data(data, source=str(path))
        logger.info("Loaded rule pack %s v%s from %s", rules.id, rules.version, path)
        return rules

    def load_data(self, data: Any, source: str = "<memory>") -> StatuteRules:
        """Validate and convert an already-parsed rule pack."""
        if not isinstance(data, dict):
            raise RulePackValidationError(
                message="Rule pack must be a mapping",
                details={"path": source},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise RulePackValidationError(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={"path": source, "pack_version": pack_version},
            )

        try:
            schema = validate_rule_pack(data)
        except ValidationError as e:
            raise RulePackValidationError(
                message=f"Rule pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "path": source},
            )

        rules = _convert_rule_pack(schema)
        self._packs[rules.id] = rules
        return rules

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_rules(self, pack_id: str) -> Optional[StatuteRules]:
        """Get a cached rule pack by ID."""
        return self._packs.get(pack_id)

    def list_packs(self) -> list[str]:
        """List IDs of all loaded rule packs."""
        return list(self._packs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_rules(path: Optional[Union[str, Path]] = None) -> StatuteRules:
    """
    Load a rule pack, defaulting to the bundled Texas pack.

    Convenience function that creates a temporary loader.
    """
    return RulePackLoader().load(path or BUNDLED_PACK)


def load_rules_from_string(content: str, format: str = "yaml") -> StatuteRules:
    """Load a rule pack from a YAML or JSON string."""
    try:
        data = json.loads(content) if format.lower() == "json" else yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RulePackLoadError(message=f"Failed to parse rule pack: {e}")
    return RulePackLoader().load_data(data)


__all__ = [
    "BUNDLED_PACK",
    "RulePackLoader",
    "load_rules",
    "load_rules_from_string",
]
