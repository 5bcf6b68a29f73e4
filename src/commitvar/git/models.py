"""Data models for commit diff splitting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

_HEADER_PATH_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")


class FileKind(str, Enum):
    MODEL = "model"
    BUILD = "build"
    SOURCE = "source"
    OTHER = "other"


@dataclass(frozen=True)
class DiffBlock:
    """All raw lines describing the changes to one file.

    ``lines[0]`` is the ``diff --git`` header. ``changes_start`` is the index
    of the first hunk marker (``@@``) or -1 if the block has none.
    """

    header: str
    lines: Tuple[str, ...]
    changes_start: int = -1

    @property
    def has_changes(self) -> bool:
        return 0 <= self.changes_start < len(self.lines)

    @property
    def path(self) -> Optional[str]:
        m = _HEADER_PATH_RE.match(self.header)
        return m.group(2) if m else None
