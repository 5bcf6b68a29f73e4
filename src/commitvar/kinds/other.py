"""Any file that is neither model, build nor source code.

Its lines are never counted: everything normalizes to an empty string.
"""

from __future__ import annotations

from typing import Sequence

from commitvar.git.models import FileKind
from commitvar.kinds.base import LineRules


def normalize(lines: Sequence[str], raw_line: str, position: int) -> str:
    return ""


def is_variability_change(lines: Sequence[str], clean_line: str, position: int) -> bool:
    return False


OTHER_RULES = LineRules(
    kind=FileKind.OTHER,
    normalize=normalize,
    is_variability_change=is_variability_change,
)
