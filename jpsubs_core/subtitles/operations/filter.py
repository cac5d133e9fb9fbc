# jpsubs_core/subtitles/operations/filter.py
# -*- coding: utf-8 -*-
"""
Removal of empty lines and ruby (furigana) lines.

Runs before the merge passes so blank or ruby lines never join a merge.
"""
from __future__ import annotations

import re

from ..data import EventList, is_dialogue

BLANK_RE = re.compile(r'^\s*$')


def remove_empty_and_rubi_lines(events: EventList, rubi_style: str = 'Rubi') -> int:
    """
    Delete dialogue lines whose text is blank or whose style is the ruby style.

    Comment lines are kept whatever their text or style.

    Returns:
        Number of lines removed
    """
    removed = 0
    i = 0
    while i < len(events):
        event = events[i]
        if is_dialogue(event) and (BLANK_RE.match(event.text) or event.style == rubi_style):
            del events[i]
            removed += 1
        else:
            i += 1
    return removed
