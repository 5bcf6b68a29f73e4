"""Variability model files (Kconfig).

Every non-empty changed line that defines or structures configuration
options is a variability change, unless it belongs to a help text. Lines
of a help text are artifact-specific information.

``depends on`` is ambiguous: it decorates either a configuration item or a
``comment "..."`` entry. It is resolved by looking at the nearest preceding
model element.
"""

from __future__ import annotations

import re
from typing import Sequence

from commitvar.git.models import FileKind
from commitvar.kinds.base import LineRules, indentation, strip_context_marker, strip_marker

COMMENT_MARKER = "#"

_CONFIG_COMMENT_RE = re.compile(r'^\s*comment\s+".*')
_CONFIG_DEF_RE = re.compile(
    r"^\s*(config|menuconfig|choice|endchoice|menu|endmenu|if|endif|bool|tristate"
    r"|string|hex|int|default|def_bool|def_tristate|prompt|select|visible if|range)(\s+.*)?"
)
_FILE_INCLUDE_RE = re.compile(r'^\s*source\s+((".*".*)|(.*/.*))')
_DEPENDS_ON_RE = re.compile(r"^\s*depends on\s+.*")

HELP_PREFIXES = ("help", "---help---", "--help--", "comment")


def normalize(lines: Sequence[str], raw_line: str, position: int) -> str:
    """Drop the diff marker and everything from the first ``#`` onward."""
    return strip_marker(raw_line).split(COMMENT_MARKER, 1)[0]


def _clean(lines: Sequence[str], position: int) -> str:
    # Context lines lose their leading space too, so indentation compares
    # equal across changed and unchanged lines.
    return strip_context_marker(lines[position]).split(COMMENT_MARKER, 1)[0]


def _defines_variability(text: str) -> bool:
    return bool(_CONFIG_DEF_RE.fullmatch(text) or _FILE_INCLUDE_RE.fullmatch(text))


def is_part_of_help(lines: Sequence[str], text: str, position: int) -> bool:
    """Check whether *text* (at *position*) belongs to a help text.

    The parent of a line is the nearest preceding non-blank line with a
    strictly smaller indentation. The line is help text if that parent
    starts a help or comment section. Lines without indentation never are.
    """
    depth = indentation(text)
    if depth == 0:
        return False
    for index in range(position - 1, -1, -1):
        previous = _clean(lines, index)
        if not previous.strip():
            continue
        if indentation(previous) < depth:
            return previous.strip().startswith(HELP_PREFIXES)
    return False


def _resolve_depends_on(lines: Sequence[str], position: int) -> bool:
    """Find the model element a ``depends on`` line at *position* belongs to.

    Scans backward: a ``comment "..."`` entry means the dependency has no
    symbol effect; a variability line means it decorates a configuration
    item. Earlier ``depends on`` lines are skipped, since resolving them
    would continue the very same backward scan. No element found means
    no variability.
    """
    for index in range(position - 1, -1, -1):
        previous = _clean(lines, index)
        if _CONFIG_COMMENT_RE.fullmatch(previous):
            return False
        if _DEPENDS_ON_RE.fullmatch(previous):
            continue
        if _defines_variability(previous) and not is_part_of_help(lines, previous, index):
            return True
    return False


def is_variability_change(lines: Sequence[str], clean_line: str, position: int) -> bool:
    if is_part_of_help(lines, clean_line, position):
        return False
    if _defines_variability(clean_line):
        return True
    if _DEPENDS_ON_RE.fullmatch(clean_line):
        return _resolve_depends_on(lines, position)
    return False


MODEL_RULES = LineRules(
    kind=FileKind.MODEL,
    normalize=normalize,
    is_variability_change=is_variability_change,
)
