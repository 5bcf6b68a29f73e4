"""Run-level aggregation of commit results."""

from __future__ import annotations

from typing import List

from commitvar.results.models import COUNTED_KINDS, CommitResult, RunSummary


class ResultCollector:
    """Accumulate commit results and unanalyzed commit names for one run."""

    def __init__(self) -> None:
        self.results: List[CommitResult] = []
        self.unanalyzed: List[str] = []

    def add(self, result: CommitResult) -> None:
        self.results.append(result)

    def add_unanalyzed(self, name: str) -> None:
        self.unanalyzed.append(name)

    def summary(self, commits_available: int) -> RunSummary:
        """Classify every analyzed commit and sum up the line counts.

        A commit changing only artifact-specific lines counts toward CCAI,
        only variability lines toward CCVI, and both toward CCAVI. Commits
        changing neither (e.g. only documentation) are analyzed but belong
        to none of the three.
        """
        summary = RunSummary(
            commits_available=commits_available,
            commits_analyzed=len(self.results),
            unanalyzed=list(self.unanalyzed),
        )
        for result in self.results:
            for kind in COUNTED_KINDS:
                totals = result.totals.get(kind)
                if totals is not None:
                    summary.kind_lines[kind] = summary.kind_lines[kind] + totals.counts

            artifact = result.artifact_lines
            variability = result.variability_lines
            if artifact == 0 and variability > 0:
                summary.variability_only_commits += 1
                summary.variability_only_lines += variability
            elif artifact > 0 and variability == 0:
                summary.artifact_only_commits += 1
                summary.artifact_only_lines += artifact
            elif artifact > 0 and variability > 0:
                summary.mixed_commits += 1
                summary.mixed_artifact_lines += artifact
                summary.mixed_variability_lines += variability
        return summary
