"""Line rules shared by every file kind: the variant type and diff primitives.

A :class:`LineRules` value bundles the two pure functions a file kind needs:

- ``normalize(lines, raw_line, position)`` strips the diff marker and any
  comment text from *raw_line*, which sits at *position* in *lines*.
- ``is_variability_change(lines, clean_line, position)`` decides whether a
  normalized, non-empty line carries variability information.

Both receive the complete line array of one diff block so they can look at
earlier lines (backtracking). Neither keeps state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from commitvar.git.models import FileKind

LINE_ADDED_MARKER = "+"
LINE_DELETED_MARKER = "-"
CONTEXT_MARKER = " "

Normalizer = Callable[[Sequence[str], str, int], str]
Classifier = Callable[[Sequence[str], str, int], bool]


@dataclass(frozen=True)
class LineRules:
    """Normalize/classify pair for one :class:`FileKind`."""

    kind: FileKind
    normalize: Normalizer
    is_variability_change: Classifier


def is_changed_line(line: str) -> bool:
    """True for added or deleted diff lines."""
    return line.startswith(LINE_ADDED_MARKER) or line.startswith(LINE_DELETED_MARKER)


def strip_marker(line: str) -> str:
    """Remove a leading ``+`` or ``-``; other lines are returned unchanged."""
    if is_changed_line(line):
        return line[1:]
    return line


def strip_context_marker(line: str) -> str:
    """Remove the one-character diff prefix of changed *and* context lines."""
    if is_changed_line(line) or line.startswith(CONTEXT_MARKER):
        return line[1:]
    return line


def change_marker(line: str) -> str:
    """Return the first character of *line* ('' for an empty line)."""
    return line[:1]


def inverse_marker(marker: str) -> str:
    """``'+'`` becomes ``'-'``; anything else becomes ``'+'``."""
    if marker == LINE_ADDED_MARKER:
        return LINE_DELETED_MARKER
    return LINE_ADDED_MARKER


def indentation(text: str) -> int:
    """Number of leading whitespace characters in *text*."""
    return len(text) - len(text.lstrip())


def ends_with_continuation(text: str) -> bool:
    """True if *text* (ignoring surrounding whitespace) ends with a backslash."""
    return text.strip().endswith("\\")
