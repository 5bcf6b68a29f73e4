"""File kind dispatch: decide how a diff block is classified."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Optional

from commitvar.analysis.counter import FileDiffCounter
from commitvar.git.models import DiffBlock, FileKind
from commitvar.kinds.registry import rules_for
from commitvar.results.models import FileDiff

DEFAULT_EXTENSION_BLACKLIST = ("lb",)

# Optional suffix after a recognized name, e.g. "Kconfig.debug", "Makefile-lib"
_SUFFIX = r"((\.|-|_|\+|~).*)?"

_DOC_DIR = r"[dD]ocumentation(s)?"
_SCRIPT_DIR = r"[sS]cript(s)?"

# --- Patterns matched against the whole "diff --git a/... b/..." line ---

FILE_EXCLUDE_RE = re.compile(rf"(.*/(({_DOC_DIR})|({_SCRIPT_DIR}))/.*)|(.*\.txt)")
SOURCE_FILE_RE = re.compile(rf".*/.*\.[hcS]{_SUFFIX}")
BUILD_FILE_RE = re.compile(rf".*/(Makefile|Kbuild){_SUFFIX}")
MODEL_FILE_RE = re.compile(rf".*/Kconfig{_SUFFIX}")


class FileKindDispatcher:
    """Select the line rules for a diff block and count its changes."""

    def __init__(
        self,
        extension_blacklist: Iterable[str] = DEFAULT_EXTENSION_BLACKLIST,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.extension_blacklist = tuple(ext.lstrip(".") for ext in extension_blacklist)
        self.logger = logger or logging.getLogger(__name__)
        self._counters: Dict[FileKind, FileDiffCounter] = {}

    def is_blacklisted(self, header: str) -> bool:
        stripped = header.strip()
        return any(stripped.endswith("." + ext) for ext in self.extension_blacklist)

    def kind_of(self, header: str) -> FileKind:
        """Return the file kind for a ``diff --git`` header line.

        Exclusions win over everything else; then source, build and model
        patterns are tried in that order.
        """
        if FILE_EXCLUDE_RE.fullmatch(header) or self.is_blacklisted(header):
            return FileKind.OTHER
        if SOURCE_FILE_RE.fullmatch(header):
            return FileKind.SOURCE
        if BUILD_FILE_RE.fullmatch(header):
            return FileKind.BUILD
        if MODEL_FILE_RE.fullmatch(header):
            return FileKind.MODEL
        return FileKind.OTHER

    def _counter(self, kind: FileKind) -> FileDiffCounter:
        if kind not in self._counters:
            self._counters[kind] = FileDiffCounter(rules_for(kind), logger=self.logger)
        return self._counters[kind]

    def dispatch(self, block: DiffBlock, commit_id: str = "") -> Optional[FileDiff]:
        """Count *block*; returns None for a block without any hunk marker."""
        if not block.has_changes:
            self.logger.warning(
                "No changes found: commit %r includes diff without any line starting with '@@' (%s)",
                commit_id,
                block.header,
            )
            return None
        kind = self.kind_of(block.header)
        counts = self._counter(kind).count(block.lines, block.changes_start)
        return FileDiff(kind=kind, path=block.path, counts=counts)
