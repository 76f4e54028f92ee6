"""
LienPilot Rule Packs

Schema validation and loading for statute rule packs.

Rule packs are YAML or JSON files holding the timing constants of one
lien statute. The bundled pack covers the Texas Property Code.

Usage:
    from lienpilot.packs import load_rules

    rules = load_rules()                    # bundled Texas pack
    rules = load_rules("path/to/pack.yaml")
"""
from __future__ import annotations

from .loader import (
    BUNDLED_PACK,
    RulePackLoader,
    load_rules,
    load_rules_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    RulePackSchema,
    check_schema_version,
    validate_rule_pack,
)

__all__ = [
    "SCHEMA_VERSION",
    "BUNDLED_PACK",
    "RulePackLoader",
    "RulePackSchema",
    "load_rules",
    "load_rules_from_string",
    "validate_rule_pack",
    "check_schema_version",
]
