# jpsubs_core/models/enums.py
# -*- coding: utf-8 -*-
from enum import Enum

class RuleType(Enum):
    """How a replacement rule's pattern and replacement are interpreted."""
    REGEX = 'regex'          # Regex pattern, replacement template with back-references
    LITERAL = 'literal'      # Plain string in, plain string out
    CALLBACK = 'callback'    # Regex pattern, replacement computed from the match

class PassName(Enum):
    BASIC_CLEANUP = 'basic_cleanup'
    SYMBOL_CLEANUP = 'symbol_cleanup'
    SPLIT = 'split_dual_speaker'
    FILTER = 'remove_empty_rubi'
    MERGE_TEXT = 'merge_identical_text'
    MERGE_TIMING = 'merge_identical_timing'
    CHARACTER_WIDTH = 'character_width'
    FINAL_ADJUSTMENTS = 'final_adjustments'
    ISOLATED_WIDTH = 'isolated_width'
    UNIFY_STYLE = 'unify_style'
