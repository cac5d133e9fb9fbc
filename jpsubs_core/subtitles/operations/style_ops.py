# jpsubs_core/subtitles/operations/style_ops.py
# -*- coding: utf-8 -*-
"""
Style operations.

Operations:
- apply_uniform_style: Assign one style name to every dialogue line
"""
from __future__ import annotations

from ..data import EventList, is_dialogue


def apply_uniform_style(events: EventList, style_name: str) -> int:
    """
    Set the style of every dialogue line to ``style_name``.

    Returns:
        Number of lines whose style changed
    """
    changed = 0
    for event in events:
        if is_dialogue(event) and event.style != style_name:
            event.style = style_name
            changed += 1
    return changed
