"""Commit analyzer: orchestrates splitting, dispatch and aggregation.

Each commit file is analyzed independently; an unreadable file is logged
and recorded as unanalyzed without stopping the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from commitvar.analysis.dispatch import FileKindDispatcher
from commitvar.git.diff_parser import DiffParser
from commitvar.results.aggregator import ResultCollector
from commitvar.results.models import COUNTED_KINDS, CommitResult

COMMIT_FILE_SUFFIX = "txt"


class AnalysisError(Exception):
    """Raised when a commit file cannot be read."""


def commit_id_from_name(name: str) -> Optional[str]:
    """Return the SHA of a ``<sha>.txt`` file name, or None for other names."""
    parts = name.split(".")
    if len(parts) != 2 or parts[1] != COMMIT_FILE_SUFFIX or not parts[0]:
        return None
    return parts[0]


def read_commit_list(path: Path) -> List[str]:
    """Read one commit SHA per line; blank lines are ignored."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Cannot read commit list {path}: {exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def collect_commit_files(input_dir: Path, commit_list: Optional[Path] = None) -> List[Path]:
    """Return the commit files to analyze.

    Without a commit list: every ``*.txt`` file of *input_dir*, sorted by
    name. With one: only the listed commits that exist, in list order.
    """
    available = sorted(p for p in input_dir.iterdir() if p.is_file() and p.name.endswith(".txt"))
    if commit_list is None:
        return available
    by_name = {p.name: p for p in available}
    selected: List[Path] = []
    for sha in read_commit_list(commit_list):
        path = by_name.get(f"{sha}.{COMMIT_FILE_SUFFIX}")
        if path is not None:
            selected.append(path)
    return selected


class CommitAnalyzer:
    """Analyze commit texts into :class:`CommitResult` values."""

    def __init__(
        self,
        dispatcher: Optional[FileKindDispatcher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.dispatcher = dispatcher or FileKindDispatcher(logger=self.logger)

    def analyze_text(
        self, commit_id: str, text: str, has_date_line: bool = True
    ) -> Optional[CommitResult]:
        """Analyze one commit; None if no diff block could be analyzed."""
        parser = DiffParser(text, has_date_line=has_date_line)
        result = CommitResult(commit_id=commit_id, date=parser.date)
        analyzed = False
        for block in parser.parse():
            file_diff = self.dispatcher.dispatch(block, commit_id=commit_id)
            if file_diff is None:
                continue
            analyzed = True
            result.files.append(file_diff)
            if file_diff.kind in COUNTED_KINDS:
                totals = result.totals_for(file_diff.kind)
                totals.files += 1
                totals.counts = totals.counts + file_diff.counts
        return result if analyzed else None

    def analyze_file(self, path: Path) -> Optional[CommitResult]:
        commit_id = commit_id_from_name(path.name)
        if commit_id is None:
            self.logger.warning(
                "File will be ignored: name of file does not match <CommitSHA>.txt: %r", path.name
            )
            return None
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise AnalysisError(f"Reading file {path.name!r} failed: {exc}") from exc
        return self.analyze_text(commit_id, text)

    def analyze_all(
        self, paths: Iterable[Path], collector: Optional[ResultCollector] = None
    ) -> ResultCollector:
        """Analyze every commit file, recording results and unanalyzed names."""
        collector = collector or ResultCollector()
        for path in paths:
            self.logger.debug("Analyzing commit %r", path.name)
            try:
                result = self.analyze_file(path)
            except AnalysisError as exc:
                self.logger.error("%s", exc)
                result = None
            if result is None:
                collector.add_unanalyzed(path.name)
            else:
                collector.add(result)
        return collector
