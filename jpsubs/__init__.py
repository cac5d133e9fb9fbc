"""
jpsubs: command-line front end for the Japanese subtitle normalizer.
"""
from jpsubs_core.orchestrator import Normalizer

__all__ = ["Normalizer"]
