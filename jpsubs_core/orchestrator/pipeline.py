# jpsubs_core/orchestrator/pipeline.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from pathlib import Path
from typing import Callable, Optional

from jpsubs_core.io.runner import PassRunner
from jpsubs_core.models.enums import PassName
from jpsubs_core.models.settings import NormalizerSettings
from jpsubs_core.subtitles.data import EventList, OperationResult
from jpsubs_core.subtitles.operations import (
    apply_uniform_style,
    convert_character_widths,
    merge_identical_text_lines,
    merge_identical_timing_lines,
    remove_empty_and_rubi_lines,
    split_dual_speaker_lines,
    widen_isolated_alnum,
)
from jpsubs_core.subtitles.rules import RuleTables, apply_replacements, load_rule_tables


def _discard(message: str) -> None:
    pass


class Normalizer:
    """
    Runs the normalization passes in their fixed order over one event collection.

    Rule tables are loaded and compiled when the Normalizer is built, so a
    malformed rule raises RuleCompileError before any event is touched.
    """
    def __init__(
        self,
        tables: Optional[RuleTables] = None,
        settings: Optional[NormalizerSettings] = None
    ):
        self.settings = settings or NormalizerSettings.from_config({})
        if tables is None:
            rules_dir = Path(self.settings.rules_dir) if self.settings.rules_dir else None
            tables = load_rule_tables(rules_dir)
        self.tables = tables

    def run(self, events: EventList, log: Callable[[str], None] = _discard) -> OperationResult:
        """
        Normalizes ``events`` in place.

        Returns a failed OperationResult, without touching anything, when the
        collection is empty.
        """
        settings = self.settings
        tables = self.tables
        runner = PassRunner(settings.to_dict(), log)

        if len(events) == 0:
            runner._log_message('[Normalizer] ERROR: No subtitle lines, nothing to process.')
            return OperationResult(
                success=False,
                operation='normalize',
                summary='Nothing to process',
                error='No subtitle lines to process',
            )

        log('--- Text Cleanup Phase ---')
        runner.run(PassName.BASIC_CLEANUP.value, apply_replacements, events, tables.basic)
        runner.run(PassName.SYMBOL_CLEANUP.value, apply_replacements, events, tables.symbols)

        log('--- Line Restructuring Phase ---')
        runner.run(PassName.SPLIT.value, split_dual_speaker_lines, events,
                   marker=settings.split_actor_marker)
        # Filter before merging so blank and ruby lines never join a merge
        runner.run(PassName.FILTER.value, remove_empty_and_rubi_lines, events,
                   rubi_style=settings.rubi_style)
        runner.run(PassName.MERGE_TEXT.value, merge_identical_text_lines, events)
        runner.run(PassName.MERGE_TIMING.value, merge_identical_timing_lines, events,
                   separator=settings.merge_separator)

        log('--- Character Normalization Phase ---')
        runner.run(PassName.CHARACTER_WIDTH.value, convert_character_widths, events,
                   tables.character_conversions)
        runner.run(PassName.FINAL_ADJUSTMENTS.value, apply_replacements, events,
                   tables.final_adjustments)
        runner.run(PassName.ISOLATED_WIDTH.value, widen_isolated_alnum, events,
                   tables.isolated_width)

        log('--- Style Phase ---')
        runner.run(PassName.UNIFY_STYLE.value, apply_uniform_style, events,
                   style_name=settings.default_style)

        total = len(events)
        runner._log_message(f'[Normalizer] Processed {total} line(s).')

        passes = runner.counts()
        return OperationResult(
            success=True,
            operation='normalize',
            events_affected=sum(passes.values()),
            summary=f'Processed {total} line(s)',
            details={
                'passes': passes,
                'records': [r.to_dict() for r in runner.records],
                'events_total': total,
            },
        )
