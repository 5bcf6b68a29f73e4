"""Source code files (C-family: ``.c``, ``.h``, ``.S``).

A changed line is a variability change if that particular line references
a configuration symbol (``CONFIG_X``, ``!CONFIG_X``, ``IS_ENABLED(CONFIG_X)``,
...). Continuation lines without such a reference are not, for example::

    #if IS_ENABLED(CONFIG_X) \\
    +	&& someInt != 5

The last line is a general change to the source file.

Block terminators inherit the status of the condition they close:
``#else``/``#endif`` that of the owning ``#if``, a closing ``}`` that of a
runtime ``if (...) {`` testing a configuration symbol. Both are resolved by
scanning backward over the visible diff lines only.
"""

from __future__ import annotations

import re
from typing import Sequence

from commitvar.git.models import FileKind
from commitvar.kinds.base import (
    LineRules,
    change_marker,
    ends_with_continuation,
    inverse_marker,
    strip_context_marker,
    strip_marker,
)

SL_COMMENT_MARKER = "//"
ML_COMMENT_START_MARKER = "/*"
ML_COMMENT_END_MARKER = "*/"

# A CONFIG_ reference preceded by whitespace or a bracket, optionally negated.
# Helper macros such as IS_ENABLED(CONFIG_X) are covered by the "(" case.
_SYMBOL_REF = r"(?:\s|[(\[{<)\]}>])!?CONFIG_"

_VAR_RE = re.compile(_SYMBOL_REF)
_IF_START_RE = re.compile(r"#\s*(?:if|elif).*" + _SYMBOL_REF)
_IF_END_RE = re.compile(r"#\s*(?:else|endif)")
_IF_ANY_RE = re.compile(r"#\s*if")
_OWNER_RE = re.compile(r"#\s*(?:if|elif)")
_ENDIF_RE = re.compile(r"#\s*endif")
_ELSE_BRACE_RE = re.compile(r"\}\s*else\s*\{")


def references_config(text: str) -> bool:
    """True if *text* contains a configuration symbol reference."""
    return _VAR_RE.search(text) is not None


def is_part_of_comment(lines: Sequence[str], position: int) -> bool:
    """Check whether the line at *position* sits inside a ``/* ... */`` comment.

    Scans backward for the nearest comment marker: an opening ``/*`` found
    before any closing ``*/`` means the line is still inside the comment.
    """
    for index in range(position - 1, -1, -1):
        previous = lines[index]
        if ML_COMMENT_END_MARKER in previous:
            return False
        if ML_COMMENT_START_MARKER in previous:
            return True
    return False


def _strip_block_comment(text: str) -> str:
    if ML_COMMENT_START_MARKER in text:
        before = text.split(ML_COMMENT_START_MARKER, 1)[0]
        if ML_COMMENT_END_MARKER not in text:
            return before
        parts = text.split(ML_COMMENT_END_MARKER)
        after = parts[1] if len(parts) > 1 else ""
        return before + " " + after
    if ML_COMMENT_END_MARKER in text:
        parts = text.split(ML_COMMENT_END_MARKER)
        return parts[1] if len(parts) > 1 else ""
    return text


def normalize(lines: Sequence[str], raw_line: str, position: int) -> str:
    text = strip_marker(raw_line)
    text = text.split(SL_COMMENT_MARKER, 1)[0]
    text = _strip_block_comment(text)
    if text.strip() and is_part_of_comment(lines, position):
        return ""
    return text


def _has_unclosed_brackets(text: str) -> bool:
    return text.count("(") != text.count(")")


def _preprocessor_condition_references_config(
    lines: Sequence[str], start: int, block_end: int, condition: str
) -> bool:
    if _IF_START_RE.search(condition):
        return True
    if not ends_with_continuation(condition):
        return False
    # Condition continued with "\": check the following lines as well.
    index = start + 1
    while True:
        block_line = normalize(lines, lines[index], index)
        if references_config(block_line):
            return True
        index += 1
        if index >= block_end or not ends_with_continuation(block_line):
            return False


def backtrack_preprocessor_condition(lines: Sequence[str], block_end: int) -> bool:
    """Find the ``#if`` or ``#elif`` owning the ``#else``/``#endif`` at *block_end*.

    A previous ``#endif`` only opens a nested block if its change marker
    differs from the inverse of the terminator's marker. Otherwise it is the
    terminator being replaced, as in::

        #if !CONFIG_X
            ...
        -#endif
            ...
        +#endif
    """
    inverted = inverse_marker(change_marker(lines[block_end]))
    nested = 0
    for index in range(block_end - 1, -1, -1):
        line = lines[index]
        if nested == 0 and not _IF_END_RE.search(line) and _OWNER_RE.search(line):
            return _preprocessor_condition_references_config(lines, index, block_end, line)
        if line and line[0] != inverted and _ENDIF_RE.search(line):
            nested += 1
        elif nested > 0 and _IF_ANY_RE.search(line):
            nested -= 1
    return False


def _runtime_condition_references_config(
    lines: Sequence[str], start: int, condition: str
) -> bool:
    prefix = condition.split("{", 1)[0]
    if references_config(prefix):
        return True
    if strip_context_marker(prefix).strip():
        return False
    # The brace stands alone: rebuild a multi-line condition such as
    #
    #   if (x == 0
    #           && CONFIG_Y == 1)
    #   {
    #
    # and stop at balanced lines, which rejects e.g. "struct name\n{".
    for index in range(start - 1, -1, -1):
        block_line = normalize(lines, lines[index], index)
        if references_config(block_line):
            return True
        if not _has_unclosed_brackets(block_line):
            return False
    return False


def backtrack_runtime_condition(lines: Sequence[str], block_end: int) -> bool:
    """Find the opening brace matching the ``}`` at *block_end*.

    Returns True if the brace opens a runtime conditional whose controlling
    expression references a configuration symbol.
    """
    inverted = inverse_marker(change_marker(lines[block_end]))
    nested = 0
    for index in range(block_end - 1, -1, -1):
        line = lines[index]
        if nested == 0 and "{" in line and not _ELSE_BRACE_RE.search(line):
            return _runtime_condition_references_config(lines, index, line)
        if line and line[0] != inverted and "}" in line:
            nested += 1
        if nested > 0 and "{" in line:
            nested -= 1
    return False


def is_variability_change(lines: Sequence[str], clean_line: str, position: int) -> bool:
    if is_part_of_comment(lines, position):
        return False
    if references_config(clean_line):
        return True
    if _IF_END_RE.search(clean_line) and backtrack_preprocessor_condition(lines, position):
        return True
    return "}" in clean_line and backtrack_runtime_condition(lines, position)


SOURCE_RULES = LineRules(
    kind=FileKind.SOURCE,
    normalize=normalize,
    is_variability_change=is_variability_change,
)
