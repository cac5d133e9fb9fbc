# jpsubs_core/subtitles/operations/split.py
# -*- coding: utf-8 -*-
"""
Dual-speaker line splitting.

TV captions often put two speakers on one line, each introduced by a
bracketed name: ``（Ａ）はい（Ｂ）いいえ``. The symbol cleanup pass removes
balanced bracket pairs, but a line like ``Ａ）はい（いいえ`` survives with a
closing bracket followed later by an opening one. Such a line is split in two,
halving its time range.
"""
from __future__ import annotations

import re

from ..data import EventList, is_dialogue

DUAL_SPEAKER_RE = re.compile(r'）.*?（', re.S)
_SPLIT_RE = re.compile(r'^.*?）(.*?)（(.*)$', re.S)


def split_dual_speaker_lines(events: EventList, marker: str = 'Split') -> int:
    """
    Split every dialogue line holding two speakers.

    The first half keeps the text between the first ``）`` and the ``（`` after
    it; the inserted second half gets everything after that ``（``. Text before
    the first ``）`` is a speaker label and is dropped. Both halves carry
    ``marker`` in the actor field. The second half ends at the original end
    time, so it absorbs the odd millisecond.

    Returns:
        Number of lines split
    """
    split_count = 0
    i = 0
    while i < len(events):
        event = events[i]
        if not is_dialogue(event) or not DUAL_SPEAKER_RE.search(event.text):
            i += 1
            continue

        match = _SPLIT_RE.match(event.text)
        original_end = event.end
        half = (event.end - event.start) // 2

        event.name = marker
        event.end = event.start + half
        event.text = match.group(1)

        second = event.copy()
        second.start = event.end
        second.end = original_end
        second.text = match.group(2)

        events.insert(i + 1, second)
        split_count += 1
        # Skip the inserted half, each line is split at most once
        i += 2

    return split_count
