"""Typed models shared across the normalizer."""

from .enums import PassName, RuleType
from .settings import NormalizerSettings

__all__ = [
    'NormalizerSettings',
    'PassName',
    'RuleType',
]
