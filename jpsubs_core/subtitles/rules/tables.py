# jpsubs_core/subtitles/rules/tables.py
# -*- coding: utf-8 -*-
"""
Rule Table Management

Loads the four JSON rule tables used by the normalizer:
    1. basic.json      - Line-break marker cleanup
    2. symbols.json    - Symbol, tag, bracket and speaker-label cleanup
    3. kana_width.json - Half-width katakana to full-width katakana
    4. final.json      - Idiom/kanji substitutions, filler removal, punctuation

Tables ship inside the package (``rules/data``). A directory passed as
``rules_dir`` may hold files with the same names; each one found replaces
the bundled table of that name.

File format:
    {"version": 1, "rules": [{"pattern": ..., "replacement": ...,
                              "type": "regex", "enabled": true,
                              "description": ""}]}
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .engine import CompiledRule, ReplacementRule, RuleError, compile_rules

logger = logging.getLogger(__name__)

BUNDLED_DIR = Path(__file__).parent / "data"

BASIC_TABLE = "basic.json"
SYMBOLS_TABLE = "symbols.json"
KANA_WIDTH_TABLE = "kana_width.json"
FINAL_TABLE = "final.json"

TABLE_FILES = (BASIC_TABLE, SYMBOLS_TABLE, KANA_WIDTH_TABLE, FINAL_TABLE)


class RuleTableError(RuleError):
    """A rule table file could not be read or has the wrong shape."""


def load_rule_file(path: Path) -> List[ReplacementRule]:
    """Load replacement rules from one JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RuleTableError(f"Cannot read rule table {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
        raise RuleTableError(f"Rule table {path} must be an object with a 'rules' list")

    rules = []
    for i, entry in enumerate(data["rules"]):
        if not isinstance(entry, dict) or "pattern" not in entry:
            raise RuleTableError(f"Rule {i} in {path} is missing 'pattern'")
        rules.append(ReplacementRule.from_dict(entry))

    logger.debug(f"Loaded {len(rules)} rules from {path}")
    return rules


def save_rule_file(path: Path, rules: List[ReplacementRule]) -> None:
    """Write rules in the table file format (used to export editable copies)."""
    data = {
        "version": 1,
        "rules": [r.to_dict() for r in rules],
    }
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def _resolve_table(name: str, rules_dir: Optional[Path]) -> Path:
    if rules_dir is not None:
        override = Path(rules_dir) / name
        if override.exists():
            logger.info(f"Using rule table override: {override}")
            return override
    return BUNDLED_DIR / name


@dataclass(frozen=True)
class RuleTables:
    """Read-only bundle of the rule tables the pipeline runs, in compiled form."""

    basic: Tuple[CompiledRule, ...]
    symbols: Tuple[CompiledRule, ...]
    character_conversions: Tuple[CompiledRule, ...]
    final_adjustments: Tuple[CompiledRule, ...]
    isolated_width: Tuple[CompiledRule, ...]

    @property
    def rule_count(self) -> int:
        return (
            len(self.basic) + len(self.symbols) + len(self.character_conversions)
            + len(self.final_adjustments) + len(self.isolated_width)
        )


def build_rule_tables(
    basic: List[ReplacementRule],
    symbols: List[ReplacementRule],
    kana_width: List[ReplacementRule],
    final: List[ReplacementRule],
) -> RuleTables:
    """
    Compile raw tables into a RuleTables bundle.

    The full-width alphanumeric table and the isolated-character callbacks are
    generated in code and appended here. Raises RuleCompileError on the first
    bad pattern.
    """
    from ..operations.width import FULLWIDTH_ALNUM_RULES, ISOLATED_ALNUM_RULES

    return RuleTables(
        basic=tuple(compile_rules(basic)),
        symbols=tuple(compile_rules(symbols)),
        character_conversions=tuple(compile_rules(list(kana_width) + list(FULLWIDTH_ALNUM_RULES))),
        final_adjustments=tuple(compile_rules(final)),
        isolated_width=tuple(compile_rules(ISOLATED_ALNUM_RULES)),
    )


def load_rule_tables(rules_dir: Optional[Path] = None) -> RuleTables:
    """Load and compile all rule tables, honoring overrides in rules_dir."""
    if rules_dir is not None and not Path(rules_dir).is_dir():
        raise RuleTableError(f"Rules directory not found: {rules_dir}")

    raw = {name: load_rule_file(_resolve_table(name, rules_dir)) for name in TABLE_FILES}
    tables = build_rule_tables(
        basic=raw[BASIC_TABLE],
        symbols=raw[SYMBOLS_TABLE],
        kana_width=raw[KANA_WIDTH_TABLE],
        final=raw[FINAL_TABLE],
    )
    logger.debug(f"Rule tables ready: {tables.rule_count} compiled rules")
    return tables
