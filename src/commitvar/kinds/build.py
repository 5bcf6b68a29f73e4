"""Build files (Makefile, Kbuild).

A changed line is a variability change if that particular line references
a configuration symbol, e.g. ``$(CONFIG_X)``. Lines merely continuing such
a line are not, for example::

    dtb-$(CONFIG_MACH_KIRKWOOD) += \\
      kirkwood-b3.dtb \\
    + kirkwood-blackarmor-nas220.dtb

The last line is a general change to the build file.

``else`` and ``endif`` are variability changes if the conditional they
close tests a configuration symbol::

    ifeq ($(CONFIG_PAYLOAD_ELF),y)
       ...
    -else
       ...
    -endif
"""

from __future__ import annotations

import re
from typing import Sequence

from commitvar.git.models import FileKind
from commitvar.kinds.base import LineRules, ends_with_continuation, strip_marker

COMMENT_MARKER = "#"

_VAR_RE = re.compile(r".*\$\(CONFIG_.*")
_CONDITION_START_RE = re.compile(r".*(ifeq|ifneq|ifdef|ifndef).*")
_CONDITION_END_RE = re.compile(r".*endif.*")
_BLOCK_END_RE = re.compile(r".*(else|endif).*")


def is_part_of_comment(lines: Sequence[str], position: int) -> bool:
    """Check whether the line at *position* continues a ``#`` comment.

    Follows trailing backslashes backward. Raw lines are inspected on
    purpose: normalizing would cut off the ``#`` we are looking for.
    """
    for index in range(position - 1, -1, -1):
        previous = lines[index]
        if not previous:
            # An empty line breaks any continuation
            return False
        previous = previous.strip()
        if not previous.endswith("\\"):
            return False
        if COMMENT_MARKER in previous:
            return True
    return False


def normalize(lines: Sequence[str], raw_line: str, position: int) -> str:
    text = strip_marker(raw_line).split(COMMENT_MARKER, 1)[0]
    if text.strip() and is_part_of_comment(lines, position):
        return ""
    return text


def _condition_references_config(
    lines: Sequence[str], start: int, block_end: int, condition: str
) -> bool:
    """Test a conditional opening line and its backslash continuations."""
    if _VAR_RE.fullmatch(condition):
        return True
    if not ends_with_continuation(condition):
        return False
    index = start + 1
    while True:
        block_line = normalize(lines, lines[index], index)
        if _VAR_RE.fullmatch(block_line):
            return True
        index += 1
        if (
            index >= block_end
            or not ends_with_continuation(block_line)
            or _CONDITION_START_RE.fullmatch(block_line)
        ):
            return False


def backtrack_condition(lines: Sequence[str], block_end: int) -> bool:
    """Find the conditional owning the ``else``/``endif`` at *block_end*.

    Returns True if that conditional references a configuration symbol.
    Nested blocks that are already closed are skipped by counting ``endif``
    lines against the block starts found further up.
    """
    nested = 0
    for index in range(block_end - 1, -1, -1):
        line = normalize(lines, lines[index], index)
        if (
            nested == 0
            and not _BLOCK_END_RE.fullmatch(line)
            and _CONDITION_START_RE.fullmatch(line)
        ):
            return _condition_references_config(lines, index, block_end, line)
        if _CONDITION_END_RE.fullmatch(line):
            nested += 1
        elif nested > 0 and _CONDITION_START_RE.fullmatch(line):
            nested -= 1
    return False


def is_variability_change(lines: Sequence[str], clean_line: str, position: int) -> bool:
    if is_part_of_comment(lines, position):
        return False
    if _VAR_RE.fullmatch(clean_line):
        return True
    return bool(_BLOCK_END_RE.fullmatch(clean_line)) and backtrack_condition(lines, position)


BUILD_RULES = LineRules(
    kind=FileKind.BUILD,
    normalize=normalize,
    is_variability_change=is_variability_change,
)
