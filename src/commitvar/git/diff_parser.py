"""Commit text splitter: one :class:`DiffBlock` per changed file.

A commit file looks like::

    2011-06-10 06:01:30 +0200
    diff --git a/drivers/net/Kconfig b/drivers/net/Kconfig
    index 1a2b3c4..5d6e7f8 100644
    --- a/drivers/net/Kconfig
    +++ b/drivers/net/Kconfig
    @@ -10,6 +10,7 @@ config NET
    ...

The first line carries the commit date; everything from each ``diff --git``
header up to the next one forms a block.
"""

from __future__ import annotations

import re
from typing import Generator, List, Optional, Sequence

from commitvar.git.models import DiffBlock

DIFF_START_MARKER = "diff --git"
CHANGES_START_MARKER = "@@"

_WHITESPACE_RE = re.compile(r"\s+")


def _strip_bom(line: str) -> str:
    """Remove UTF-8 BOM if present."""
    return line.lstrip("\ufeff")


def _normalise(line: str) -> str:
    """Strip a trailing CR (CRLF → LF). Other whitespace is significant."""
    return line.rstrip("\r")


def parse_commit_date(line: Optional[str]) -> Optional[str]:
    """Turn ``2011-06-10 06:01:30 +0200`` into ``2011/06/10``.

    Returns None for a missing line or one whose first field is not a
    dash-separated year, month and day.
    """
    if not line or not line.strip():
        return None
    first = _WHITESPACE_RE.split(line.strip())[0]
    parts = first.split("-")
    if len(parts) != 3:
        return None
    return "/".join(parts)


def find_changes_start(lines: Sequence[str]) -> int:
    """Index of the first line starting with ``@@``, or -1."""
    for idx, line in enumerate(lines):
        if line.startswith(CHANGES_START_MARKER):
            return idx
    return -1


class DiffParser:
    """Split commit text into per-file diff blocks.

    Usage::

        parser = DiffParser(commit_text)
        print(parser.date)
        for block in parser.parse():
            ...
    """

    def __init__(self, commit_text: str, has_date_line: bool = True) -> None:
        self._lines = [_normalise(line) for line in commit_text.split("\n")]
        if self._lines:
            self._lines[0] = _strip_bom(self._lines[0])
        # A trailing newline is not an extra (empty) line of the last block
        if self._lines and self._lines[-1] == "":
            self._lines.pop()
        self.date: Optional[str] = None
        if has_date_line and self._lines:
            self.date = parse_commit_date(self._lines[0])
            self._lines = self._lines[1:]

    def parse(self) -> Generator[DiffBlock, None, None]:
        """Yield one DiffBlock per ``diff --git`` header."""
        current: Optional[List[str]] = None
        for line in self._lines:
            if line.startswith(DIFF_START_MARKER):
                if current is not None:
                    yield self._make_block(current)
                current = [line]
            elif current is not None:
                current.append(line)
            # Lines before the first header are preamble and ignored
        if current is not None:
            yield self._make_block(current)

    @staticmethod
    def _make_block(lines: List[str]) -> DiffBlock:
        return DiffBlock(
            header=lines[0],
            lines=tuple(lines),
            changes_start=find_changes_start(lines),
        )
