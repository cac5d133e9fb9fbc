"""Normalizer settings dataclass.

Typed view over the settings dict loaded by ``AppConfig``. Pipeline code reads
settings through this dataclass rather than through raw dict access.

Settings are organized by category:
- Styles: target style for every dialogue line, ruby style to drop
- Passes: split marker, timing-merge separator
- Rules: optional directory overriding the bundled rule tables
- Output: default output naming and encoding
- Logging: log folder and compact mode
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class NormalizerSettings:
    """Complete normalizer settings with typed fields."""

    # =========================================================================
    # Style Settings
    # =========================================================================
    default_style: str
    rubi_style: str

    # =========================================================================
    # Pass Settings
    # =========================================================================
    split_actor_marker: str
    merge_separator: str

    # =========================================================================
    # Rule Settings
    # =========================================================================
    rules_dir: str  # Empty string = bundled tables only

    # =========================================================================
    # Output Settings
    # =========================================================================
    output_suffix: str
    encoding: str

    # =========================================================================
    # Logging Settings
    # =========================================================================
    logs_folder: str
    log_compact: bool

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> NormalizerSettings:
        """Create settings from a config dictionary, filling defaults."""
        from ..config import DEFAULT_SETTINGS

        merged = dict(DEFAULT_SETTINGS)
        merged.update({k: v for k, v in config.items() if v is not None})

        return cls(
            default_style=str(merged["default_style"]),
            rubi_style=str(merged["rubi_style"]),
            split_actor_marker=str(merged["split_actor_marker"]),
            merge_separator=str(merged["merge_separator"]),
            rules_dir=str(merged["rules_dir"] or ""),
            output_suffix=str(merged["output_suffix"]),
            encoding=str(merged["encoding"]),
            logs_folder=str(merged["logs_folder"] or ""),
            log_compact=bool(merged["log_compact"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_style": self.default_style,
            "rubi_style": self.rubi_style,
            "split_actor_marker": self.split_actor_marker,
            "merge_separator": self.merge_separator,
            "rules_dir": self.rules_dir,
            "output_suffix": self.output_suffix,
            "encoding": self.encoding,
            "logs_folder": self.logs_folder,
            "log_compact": self.log_compact,
        }
