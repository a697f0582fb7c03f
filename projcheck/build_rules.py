"""Registry of the available rules, in reporting order."""

from typing import Any

from projcheck.directory_case_rule import DirectoryCaseRule
from projcheck.file_case_rule import FileCaseRule
from projcheck.ordinal_prefix_rule import OrdinalPrefixRule
from projcheck.preferred_libraries_rule import PreferredLibrariesRule
from projcheck.root_config_rule import RootConfigRule
from projcheck.rule import Rule
from projcheck.script_header_rule import ScriptHeaderRule
from projcheck.separator_consistency_rule import SeparatorConsistencyRule
from projcheck.unique_ordinal_rule import UniqueOrdinalRule
from projcheck.variable_naming_rule import VariableNamingRule

RULE_TYPES: list[type[Rule]] = [
    OrdinalPrefixRule,
    DirectoryCaseRule,
    FileCaseRule,
    ScriptHeaderRule,
    VariableNamingRule,
    PreferredLibrariesRule,
    RootConfigRule,
    SeparatorConsistencyRule,
    UniqueOrdinalRule,
]


def build_rules(config: dict[str, Any]) -> list[Rule]:
    """Instantiate every rule whose severity policy isn't 'off'."""
    severity = config.get("severity", {})
    return [
        cls(config)
        for cls in RULE_TYPES
        if severity.get(cls.rule_id, "fail") != "off"
    ]
