# jpsubs_core/pipeline_components/__init__.py
"""
Pipeline components for normalization job execution.
"""

from .log_manager import LogManager

__all__ = [
    'LogManager',
]
