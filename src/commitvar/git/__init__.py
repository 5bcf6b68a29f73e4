"""Git interface layer: adapter, commit text splitting, models."""

from commitvar.git.adapter import (
    GitError,
    extract_commits,
    get_commit_text,
    get_repo_root,
    list_commits,
)
from commitvar.git.diff_parser import DiffParser, find_changes_start, parse_commit_date
from commitvar.git.models import DiffBlock, FileKind

__all__ = [
    "DiffBlock",
    "DiffParser",
    "FileKind",
    "GitError",
    "extract_commits",
    "find_changes_start",
    "get_commit_text",
    "get_repo_root",
    "list_commits",
    "parse_commit_date",
]
