# jpsubs_core/subtitles/operations/__init__.py
"""
Normalization passes over an event collection.

Each pass mutates the collection in place and returns a count of what it
touched.
"""
from .filter import remove_empty_and_rubi_lines
from .merge import merge_identical_text_lines, merge_identical_timing_lines
from .split import split_dual_speaker_lines
from .style_ops import apply_uniform_style
from .width import (
    FULLWIDTH_ALNUM_RULES,
    ISOLATED_ALNUM_RULES,
    convert_character_widths,
    to_fullwidth,
    widen_isolated_alnum,
)

__all__ = [
    'FULLWIDTH_ALNUM_RULES',
    'ISOLATED_ALNUM_RULES',
    'apply_uniform_style',
    'convert_character_widths',
    'merge_identical_text_lines',
    'merge_identical_timing_lines',
    'remove_empty_and_rubi_lines',
    'split_dual_speaker_lines',
    'to_fullwidth',
    'widen_isolated_alnum',
]
