# jpsubs_core/subtitles/operations/width.py
# -*- coding: utf-8 -*-
"""
Character width normalization.

Two passes share this module:

- convert_character_widths: table conversion through the rule engine.
  Half-width katakana become full-width (from kana_width.json) and
  full-width Latin letters/digits become half-width (generated below).
- widen_isolated_alnum: an ASCII letter or digit that stands alone, with no
  ASCII letter/digit on either side, is widened to full-width. Runs of two or
  more (``OK``, ``2024``) stay half-width.
"""
from __future__ import annotations

from typing import Optional, Sequence

from ..data import EventList
from ..rules.engine import CompiledRule, ReplacementRule, apply_replacements

FULLWIDTH_OFFSET = 0xFEE0

_ALNUM_RANGES = (('A', 'Z'), ('a', 'z'), ('0', '9'))


def _is_ascii_alnum(char: str) -> bool:
    return any(lo <= char <= hi for lo, hi in _ALNUM_RANGES)


def to_fullwidth(char: str) -> str:
    """Map one ASCII letter/digit to its full-width form; anything else is returned as-is."""
    if len(char) == 1 and _is_ascii_alnum(char):
        return chr(ord(char) + FULLWIDTH_OFFSET)
    return char


def _widen_match(match) -> str:
    return to_fullwidth(match.group(1))


def _fullwidth_alnum_rules() -> tuple:
    rules = []
    for lo, hi in _ALNUM_RANGES:
        for code in range(ord(lo), ord(hi) + 1):
            rules.append(ReplacementRule(
                pattern=chr(code + FULLWIDTH_OFFSET),
                replacement=chr(code),
                rule_type='literal',
            ))
    return tuple(rules)


# Ａ-Ｚ, ａ-ｚ, ０-９ to ASCII
FULLWIDTH_ALNUM_RULES = _fullwidth_alnum_rules()

_ALNUM = '[A-Za-z0-9]'
_NOT_ALNUM = '[^A-Za-z0-9]'

# Lookarounds keep neighbours out of the match, so two isolated characters
# separated by one non-alnum character ("a b") are both widened.
ISOLATED_ALNUM_RULES = (
    ReplacementRule(
        pattern=f'(?<={_NOT_ALNUM})({_ALNUM})(?={_NOT_ALNUM})',
        replacement=_widen_match,
        rule_type='callback',
        description='Isolated inside the line',
    ),
    ReplacementRule(
        pattern=f'^({_ALNUM})(?={_NOT_ALNUM})',
        replacement=_widen_match,
        rule_type='callback',
        description='Isolated at line start',
    ),
    ReplacementRule(
        pattern=f'(?<={_NOT_ALNUM})({_ALNUM})$',
        replacement=_widen_match,
        rule_type='callback',
        description='Isolated at line end',
    ),
    ReplacementRule(
        pattern=f'^({_ALNUM})$',
        replacement=_widen_match,
        rule_type='callback',
        description='Sole character on the line',
    ),
)


def convert_character_widths(events: EventList, rules: Sequence[CompiledRule]) -> int:
    """
    Apply the character conversion table to every dialogue line.

    Args:
        events: Event collection, modified in place
        rules: Compiled kana/alphanumeric conversion table

    Returns:
        Number of lines whose text changed
    """
    return apply_replacements(events, rules)


def widen_isolated_alnum(events: EventList, rules: Optional[Sequence[CompiledRule]] = None) -> int:
    """Widen lone ASCII letters/digits. Returns the number of lines changed."""
    return apply_replacements(events, rules if rules is not None else ISOLATED_ALNUM_RULES)
