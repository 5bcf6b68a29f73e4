"""Counting driver shared by every file kind."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from commitvar.kinds.base import LINE_ADDED_MARKER, LineRules, is_changed_line
from commitvar.results.models import ChangeCounts


class FileDiffCounter:
    """Count general and variability changes of one diff block.

    Walks the lines from the first hunk marker to the end. Every added or
    deleted line whose normalized text is non-blank increments exactly one
    of the four counters in :class:`ChangeCounts`.
    """

    def __init__(self, rules: LineRules, logger: Optional[logging.Logger] = None) -> None:
        self.rules = rules
        self.logger = logger or logging.getLogger(__name__)

    def count(self, lines: Sequence[str], changes_start: int) -> ChangeCounts:
        counts = ChangeCounts()
        if changes_start < 0:
            return counts
        for position in range(changes_start, len(lines)):
            line = lines[position]
            if not is_changed_line(line) or not line[1:].strip():
                continue
            clean_line = self.rules.normalize(lines, line, position)
            if not clean_line.strip():
                continue
            is_var = self.rules.is_variability_change(lines, clean_line, position)
            added = line.startswith(LINE_ADDED_MARKER)
            if is_var:
                self.logger.debug(
                    "Variability change found in %s file: %r", self.rules.kind.value, clean_line
                )
                if added:
                    counts.added_var += 1
                else:
                    counts.deleted_var += 1
            elif added:
                counts.added += 1
            else:
                counts.deleted += 1
        return counts
