# jpsubs_core/io/runner.py

# -*- coding: utf-8 -*-

"""
Wrapper for running normalization passes with logging and bookkeeping.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List

from ..subtitles.data import EventList, OperationRecord, dialogue_count


class PassRunner:
    """Executes normalization passes and reports what each one changed."""

    def __init__(self, config: dict, log_callback: Callable[[str], None]):
        self.config = config
        self.log = log_callback
        self.records: List[OperationRecord] = []

    def _log_message(self, message: str):
        """Formats and sends a message to the log callback."""
        ts = datetime.now().strftime('%H:%M:%S')
        line = f'[{ts}] {message}'
        self.log(line)

    def run(
        self,
        name: str,
        func: Callable[..., int],
        events: EventList,
        *args: Any,
        **parameters: Any
    ) -> int:
        """
        Runs one pass over ``events`` and records the result.

        ``args`` are passed straight to the pass; ``parameters`` are passed as
        keyword arguments and also stored on the OperationRecord.
        Returns the count reported by the pass.
        """
        compact = self.config.get('log_compact', True)
        before = dialogue_count(events)

        affected = func(events, *args, **parameters)

        after = dialogue_count(events)
        summary = f'{affected} affected'
        if after != before:
            summary += f', lines {before} -> {after}'

        self.records.append(OperationRecord(
            operation=name,
            timestamp=datetime.now(),
            parameters={k: v for k, v in parameters.items() if isinstance(v, (str, int, float, bool))},
            events_affected=affected,
            events_before=before,
            events_after=after,
            summary=summary,
        ))

        if affected or not compact:
            self._log_message(f'[{name}] {summary}')

        return affected

    def counts(self) -> Dict[str, int]:
        """Pass name -> affected count, in run order."""
        return {r.operation: r.events_affected for r in self.records}
