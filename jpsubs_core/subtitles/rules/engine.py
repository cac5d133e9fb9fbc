# jpsubs_core/subtitles/rules/engine.py
"""
Replacement rule engine.

Applies ordered tables of (pattern, replacement) rules to dialogue text.
Every table goes through the same path:

    ReplacementRule  --compile_rules-->  CompiledRule  --apply_to_text-->  str

Rule types (``rule_type``):
    regex     pattern is a regular expression, replacement is a template
              that may use back-references (``\\1``, ``\\g<name>``)
    literal   pattern and replacement are plain strings
    callback  pattern is a regular expression, replacement is a function
              that receives the match and returns the substitution

Compilation happens up front. A single bad pattern raises RuleCompileError
and nothing is applied, so a broken rule can never half-rewrite a file.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

from ...models.enums import RuleType
from ..data import EventList, is_dialogue

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[["re.Match[str]"], str]]


class RuleError(ValueError):
    """Base class for rule table problems."""


class RuleCompileError(RuleError):
    """A rule's pattern could not be compiled."""

    def __init__(self, rule: "ReplacementRule", reason: str):
        self.rule = rule
        self.reason = reason
        label = f" ({rule.description})" if rule.description else ""
        super().__init__(f"Invalid rule pattern '{rule.pattern}'{label}: {reason}")


@dataclass(frozen=True)
class ReplacementRule:
    """A single replacement rule."""
    pattern: str
    replacement: Replacement
    rule_type: str = RuleType.REGEX.value
    enabled: bool = True
    description: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        if callable(self.replacement):
            raise TypeError("callback rules cannot be serialized")
        return {
            "pattern": self.pattern,
            "replacement": self.replacement,
            "type": self.rule_type,
            "enabled": self.enabled,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReplacementRule":
        """Create from dictionary."""
        return cls(
            pattern=data.get("pattern", ""),
            replacement=data.get("replacement", ""),
            rule_type=data.get("type", RuleType.REGEX.value),
            enabled=data.get("enabled", True),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class CompiledRule:
    """A rule ready to apply: compiled pattern plus a re.sub-compatible replacement."""
    regex: "re.Pattern[str]"
    replacement: Replacement
    source: ReplacementRule

    def apply(self, text: str) -> str:
        return self.regex.sub(self.replacement, text)


def compile_rule(rule: ReplacementRule) -> CompiledRule:
    try:
        rule_type = RuleType(rule.rule_type)
    except ValueError:
        raise RuleCompileError(rule, f"unknown rule type '{rule.rule_type}'") from None

    if not rule.pattern:
        raise RuleCompileError(rule, "empty pattern")

    if rule_type is RuleType.LITERAL:
        if not isinstance(rule.replacement, str):
            raise RuleCompileError(rule, "literal rules need a string replacement")
        # Escape backslashes so re.sub does not read them as group references
        return CompiledRule(
            regex=re.compile(re.escape(rule.pattern)),
            replacement=rule.replacement.replace('\\', r'\\'),
            source=rule,
        )

    try:
        regex = re.compile(rule.pattern)
    except re.error as e:
        raise RuleCompileError(rule, str(e)) from e

    if rule_type is RuleType.CALLBACK:
        if not callable(rule.replacement):
            raise RuleCompileError(rule, "callback rules need a callable replacement")
        return CompiledRule(regex=regex, replacement=rule.replacement, source=rule)

    if not isinstance(rule.replacement, str):
        raise RuleCompileError(rule, "regex rules need a string replacement")
    # re compiles the template before searching, so bad group references fail here
    try:
        regex.sub(rule.replacement, "")
    except (re.error, IndexError) as e:
        raise RuleCompileError(rule, f"bad replacement template: {e}") from e
    return CompiledRule(regex=regex, replacement=rule.replacement, source=rule)


def compile_rules(rules: Iterable[ReplacementRule]) -> list[CompiledRule]:
    """Compile every enabled rule in table order."""
    compiled = [compile_rule(rule) for rule in rules if rule.enabled]
    logger.debug(f"Compiled {len(compiled)} replacement rules")
    return compiled


def _ensure_compiled(
    rules: Sequence[Union[ReplacementRule, CompiledRule]]
) -> list[CompiledRule]:
    if all(isinstance(r, CompiledRule) for r in rules):
        return list(rules)
    return [
        r if isinstance(r, CompiledRule) else compile_rule(r)
        for r in rules
        if isinstance(r, CompiledRule) or r.enabled
    ]


def apply_to_text(text: str, rules: Sequence[Union[ReplacementRule, CompiledRule]]) -> str:
    """Apply each rule in order to a single string."""
    for rule in _ensure_compiled(rules):
        text = rule.apply(text)
    return text


def apply_replacements(
    events: EventList,
    rules: Sequence[Union[ReplacementRule, CompiledRule]],
) -> int:
    """
    Rewrite the text of every dialogue event with the given rule table.

    Args:
        events: Event collection, modified in place
        rules: Ordered rule table (raw rules are compiled first)

    Returns:
        Number of events whose text changed
    """
    compiled = _ensure_compiled(rules)
    changed = 0
    for event in events:
        if not is_dialogue(event):
            continue
        new_text = event.text
        for rule in compiled:
            new_text = rule.apply(new_text)
        if new_text != event.text:
            event.text = new_text
            changed += 1
    return changed
