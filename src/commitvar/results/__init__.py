"""Result models and run aggregation."""

from commitvar.results.aggregator import ResultCollector
from commitvar.results.models import (
    COUNTED_KINDS,
    ChangeCounts,
    CommitResult,
    FileDiff,
    KindTotals,
    RunSummary,
)

__all__ = [
    "COUNTED_KINDS",
    "ChangeCounts",
    "CommitResult",
    "FileDiff",
    "KindTotals",
    "ResultCollector",
    "RunSummary",
]
