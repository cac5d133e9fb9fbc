# jpsubs_core/subtitles/__init__.py
"""Subtitle event types, replacement rules and normalization passes."""
from .data import EventList, OperationRecord, OperationResult, dialogue_count, is_dialogue

__all__ = [
    'EventList',
    'OperationRecord',
    'OperationResult',
    'dialogue_count',
    'is_dialogue',
]
