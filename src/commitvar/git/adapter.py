"""Git subprocess wrapper: commit listing and commit file extraction."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 60) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git error: {stderr or 'exit code ' + str(result.returncode)}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def list_commits(repo_root: Path, rev_range: str, include_merges: bool = False) -> List[str]:
    """Return the SHAs in *rev_range*, oldest first."""
    args = ["rev-list", "--reverse"]
    if not include_merges:
        args.append("--no-merges")
    args.append(rev_range)
    output = _run_git(args, cwd=repo_root)
    return [line.strip() for line in output.splitlines() if line.strip()]


def get_commit_text(repo_root: Path, sha: str) -> str:
    """Return a commit in commit-file format: date line, then the diff."""
    date_line = _run_git(["show", "-s", "--format=%ci", sha], cwd=repo_root).strip()
    diff = _run_git(
        ["show", "--format=", "--no-color", "--no-ext-diff", "--src-prefix=a/", "--dst-prefix=b/", sha],
        cwd=repo_root,
        timeout=300,
    )
    return f"{date_line}\n{diff.lstrip(chr(10))}"


def extract_commits(repo_root: Path, rev_range: str, output_dir: Path) -> List[Path]:
    """Write one ``<sha>.txt`` commit file per commit in *rev_range*."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for sha in list_commits(repo_root, rev_range):
        path = output_dir / f"{sha}.txt"
        path.write_text(get_commit_text(repo_root, sha), encoding="utf-8")
        logger.debug("Extracted commit %s", sha)
        written.append(path)
    return written
