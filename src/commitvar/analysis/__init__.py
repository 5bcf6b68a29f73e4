"""Analysis: counting driver, file kind dispatch, commit analyzer."""

from commitvar.analysis.counter import FileDiffCounter
from commitvar.analysis.dispatch import FileKindDispatcher
from commitvar.analysis.engine import (
    AnalysisError,
    CommitAnalyzer,
    collect_commit_files,
    commit_id_from_name,
    read_commit_list,
)

__all__ = [
    "AnalysisError",
    "CommitAnalyzer",
    "FileDiffCounter",
    "FileKindDispatcher",
    "collect_commit_files",
    "commit_id_from_name",
    "read_commit_list",
]
