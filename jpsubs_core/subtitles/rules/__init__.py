"""Replacement rules: engine and table loading."""

from .engine import (
    CompiledRule,
    ReplacementRule,
    RuleCompileError,
    RuleError,
    apply_replacements,
    apply_to_text,
    compile_rule,
    compile_rules,
)
from .tables import (
    RuleTableError,
    RuleTables,
    build_rule_tables,
    load_rule_file,
    load_rule_tables,
    save_rule_file,
)

__all__ = [
    'CompiledRule',
    'ReplacementRule',
    'RuleCompileError',
    'RuleError',
    'RuleTableError',
    'RuleTables',
    'apply_replacements',
    'apply_to_text',
    'build_rule_tables',
    'compile_rule',
    'compile_rules',
    'load_rule_file',
    'load_rule_tables',
    'save_rule_file',
]
