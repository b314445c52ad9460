"""
Rolling history of past calculations.

Newest entry first, bounded at ``HISTORY_LIMIT`` entries: adding one
more evicts the oldest.  The history widget renders ``preview`` and
``summary`` strings from each entry.
"""

from collections import deque
from typing import Deque, Iterator, List, Sequence

from .constants import HISTORY_LIMIT, HISTORY_PREVIEW_VALUES
from .data_model import HistoryEntry, StatisticsReport
from .formatting import format_values


def preview(entry: HistoryEntry) -> str:
    """Short rendering of the sample: at most the first five values."""
    sample = entry.sample
    if len(sample) > HISTORY_PREVIEW_VALUES:
        head = format_values(sample[:HISTORY_PREVIEW_VALUES])
        return f"{head}... ({len(sample)} values)"
    return format_values(sample)


def summary(entry: HistoryEntry) -> str:
    report = entry.report
    return f"Mean: {report.mean:.2f} | Std Dev: {report.std_dev:.2f}"


class CalculationHistory:
    """Bounded, newest-first list of ``HistoryEntry`` records."""

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"history limit must be at least 1, got {limit}")
        self._entries: Deque[HistoryEntry] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._entries.maxlen

    def add(self, sample: Sequence[float], report: StatisticsReport) -> HistoryEntry:
        """Record a calculation at the top; returns the new entry."""
        entry = HistoryEntry(
            sample=tuple(float(v) for v in sample), report=report,
        )
        # appendleft on a full deque drops the rightmost (oldest) entry
        self._entries.appendleft(entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
