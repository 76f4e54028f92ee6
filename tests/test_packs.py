"""
Tests for statute rule pack loading.

Validates:
- Bundled pack loads and matches the built-in defaults
- Malformed YAML fails
- Missing keys fail
- Inconsistent rules fail
- Schema version mismatch fails
"""

import json

import pytest
import yaml

from lienpilot.exceptions import RulePackLoadError, RulePackValidationError
from lienpilot.models import DEFAULT_RULES, DeadlineType, RoleTier
from lienpilot.packs import (
    BUNDLED_PACK,
    RulePackLoader,
    load_rules,
    load_rules_from_string,
)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def bundled_pack_data():
    with open(BUNDLED_PACK, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def minimal_pack():
    return {
        "schema_version": "1.0.0",
        "id": "TEST-PACK",
        "name": "Test Pack",
        "jurisdiction": "TEST",
        "version": "0.1.0",
        "lien_filing": {
            "original_contractor_months": 4,
            "subcontractor_months": 3,
        },
    }


# ============================================================================
# LOADING
# ============================================================================

def test_bundled_pack_matches_defaults():
    rules = load_rules()
    assert rules == DEFAULT_RULES


def test_bundled_pack_values():
    rules = load_rules()
    assert rules.id == "US-TX-PROPERTY-CODE-53"
    assert rules.months_for(RoleTier.ORIGINAL_CONTRACTOR) == 3
    assert rules.months_for(RoleTier.SUBCONTRACTOR_TIER) == 2
    assert rules.filing_day_of_month == 15
    assert rules.legal_reference(DeadlineType.BOND_CLAIM) == "Texas Government Code § 2253.073"


def test_minimal_pack_uses_section_defaults(minimal_pack):
    rules = RulePackLoader().load_data(minimal_pack)
    assert rules.original_contractor_months == 4
    assert rules.filing_day_of_month == 15
    assert rules.bond_claim_original_contractor_days == 90
    assert rules.legal_reference(DeadlineType.MECHANICS_LIEN) == "Texas Property Code § 53.052"


def test_load_from_file(minimal_pack, tmp_path):
    path = tmp_path / "pack.yaml"
    path.write_text(yaml.safe_dump(minimal_pack), encoding="utf-8")

    loader = RulePackLoader()
    rules = loader.load(path)

    assert rules.id == "TEST-PACK"
    assert loader.get_rules("TEST-PACK") is rules
    assert loader.list_packs() == ["TEST-PACK"]


def test_load_json_file(minimal_pack, tmp_path):
    path = tmp_path / "pack.json"
    path.write_text(json.dumps(minimal_pack), encoding="utf-8")
    assert load_rules(path).subcontractor_months == 3


def test_load_from_string(minimal_pack):
    rules = load_rules_from_string(yaml.safe_dump(minimal_pack))
    assert rules.version == "0.1.0"

    rules = load_rules_from_string(json.dumps(minimal_pack), format="json")
    assert rules.version == "0.1.0"


# ============================================================================
# FAILURES
# ============================================================================

def test_file_not_found(tmp_path):
    with pytest.raises(RulePackLoadError) as exc_info:
        load_rules(tmp_path / "missing.yaml")
    assert "missing.yaml" in exc_info.value.details["path"]


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("lien_filing: [unclosed", encoding="utf-8")
    with pytest.raises(RulePackLoadError):
        load_rules(path)


def test_not_a_mapping():
    with pytest.raises(RulePackValidationError):
        load_rules_from_string("- just\n- a list\n")


def test_missing_lien_filing(minimal_pack):
    del minimal_pack["lien_filing"]
    with pytest.raises(RulePackValidationError) as exc_info:
        RulePackLoader().load_data(minimal_pack)
    assert exc_info.value.details["errors"]


def test_original_contractor_shorter_fails(minimal_pack):
    minimal_pack["lien_filing"]["original_contractor_months"] = 1
    with pytest.raises(RulePackValidationError):
        RulePackLoader().load_data(minimal_pack)


def test_filing_day_out_of_range(minimal_pack):
    minimal_pack["lien_filing"]["day_of_month"] = 31
    with pytest.raises(RulePackValidationError):
        RulePackLoader().load_data(minimal_pack)


def test_unordered_warning_bands(bundled_pack_data):
    bundled_pack_data["warning_days"] = {"critical": 14, "high": 7, "medium": 30}
    with pytest.raises(RulePackValidationError):
        RulePackLoader().load_data(bundled_pack_data)


def test_unknown_legal_reference_key(bundled_pack_data):
    bundled_pack_data["legal_references"]["small_claims"] = "Justice Court"
    with pytest.raises(RulePackValidationError):
        RulePackLoader().load_data(bundled_pack_data)


def test_schema_version_mismatch(minimal_pack):
    minimal_pack["schema_version"] = "2.0.0"
    with pytest.raises(RulePackValidationError):
        RulePackLoader().load_data(minimal_pack)

    rules = RulePackLoader(strict_version=False).load_data(minimal_pack)
    assert rules.id == "TEST-PACK"
