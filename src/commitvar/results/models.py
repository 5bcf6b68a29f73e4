"""Result data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from commitvar.git.models import FileKind

# Kinds that are counted; OTHER files never contribute lines or files.
COUNTED_KINDS = (FileKind.SOURCE, FileKind.BUILD, FileKind.MODEL)


@dataclass
class ChangeCounts:
    """Per-file line counts.

    The four counters are disjoint: a changed line is either general
    (``added``/``deleted``) or variability-related (``added_var``/``deleted_var``).
    """

    added: int = 0
    deleted: int = 0
    added_var: int = 0
    deleted_var: int = 0

    @property
    def artifact_lines(self) -> int:
        return self.added + self.deleted

    @property
    def variability_lines(self) -> int:
        return self.added_var + self.deleted_var

    @property
    def total(self) -> int:
        return self.artifact_lines + self.variability_lines

    def __add__(self, other: ChangeCounts) -> ChangeCounts:
        return ChangeCounts(
            added=self.added + other.added,
            deleted=self.deleted + other.deleted,
            added_var=self.added_var + other.added_var,
            deleted_var=self.deleted_var + other.deleted_var,
        )


@dataclass
class FileDiff:
    """Counts for one changed file of a commit."""

    kind: FileKind
    path: Optional[str]
    counts: ChangeCounts = field(default_factory=ChangeCounts)


@dataclass
class KindTotals:
    """Changed files and line counts of one kind within a commit."""

    files: int = 0
    counts: ChangeCounts = field(default_factory=ChangeCounts)

    @property
    def artifact_lines(self) -> int:
        return self.counts.artifact_lines

    @property
    def variability_lines(self) -> int:
        return self.counts.variability_lines


def _empty_totals() -> Dict[FileKind, KindTotals]:
    return {kind: KindTotals() for kind in COUNTED_KINDS}


@dataclass
class CommitResult:
    """Analysis result of a single commit."""

    commit_id: str
    date: Optional[str] = None
    totals: Dict[FileKind, KindTotals] = field(default_factory=_empty_totals)
    files: List[FileDiff] = field(default_factory=list)

    def totals_for(self, kind: FileKind) -> KindTotals:
        return self.totals.setdefault(kind, KindTotals())

    @property
    def artifact_lines(self) -> int:
        return sum(t.artifact_lines for t in self.totals.values())

    @property
    def variability_lines(self) -> int:
        return sum(t.variability_lines for t in self.totals.values())


@dataclass
class RunSummary:
    """Aggregated numbers over all commits of a run."""

    commits_available: int = 0
    commits_analyzed: int = 0
    # Commits changing artifact-specific information only (CCAI)
    artifact_only_commits: int = 0
    artifact_only_lines: int = 0
    # Commits changing variability information only (CCVI)
    variability_only_commits: int = 0
    variability_only_lines: int = 0
    # Commits changing both (CCAVI)
    mixed_commits: int = 0
    mixed_artifact_lines: int = 0
    mixed_variability_lines: int = 0
    # Per-kind line totals (CML, CCL, CBL), each artifact/variability
    kind_lines: Dict[FileKind, ChangeCounts] = field(
        default_factory=lambda: {kind: ChangeCounts() for kind in COUNTED_KINDS}
    )
    unanalyzed: List[str] = field(default_factory=list)

    @property
    def commits_unanalyzed(self) -> int:
        return len(self.unanalyzed)
