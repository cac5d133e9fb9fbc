# jpsubs_core/subtitles/operations/merge.py
# -*- coding: utf-8 -*-
"""
Adjacent line merging.

Both passes walk the collection with a cursor. After a merge the next line is
deleted and the same position is examined again, so a run of any length
collapses into its first line.
"""
from __future__ import annotations

from ..data import EventList, is_dialogue


def merge_identical_text_lines(events: EventList) -> int:
    """
    Merge neighbouring dialogue lines that show the same text.

    The first line is extended to the second line's end time and the second
    is removed.

    Returns:
        Number of merges performed
    """
    merged = 0
    i = 0
    while i < len(events) - 1:
        current, following = events[i], events[i + 1]
        if is_dialogue(current) and is_dialogue(following) and current.text == following.text:
            current.end = following.end
            del events[i + 1]
            merged += 1
        else:
            i += 1
    return merged


def merge_identical_timing_lines(events: EventList, separator: str = '　') -> int:
    """
    Merge neighbouring dialogue lines with identical start and end times.

    Texts are joined with ``separator`` (a full-width space by default).

    Returns:
        Number of merges performed
    """
    merged = 0
    i = 0
    while i < len(events) - 1:
        current, following = events[i], events[i + 1]
        if (
            is_dialogue(current) and is_dialogue(following)
            and current.start == following.start
            and current.end == following.end
        ):
            current.text = f'{current.text}{separator}{following.text}'
            del events[i + 1]
            merged += 1
        else:
            i += 1
    return merged
