"""Kind registry: maps each :class:`FileKind` to its line rules."""

from __future__ import annotations

from typing import Dict

from commitvar.git.models import FileKind
from commitvar.kinds.base import LineRules
from commitvar.kinds.build import BUILD_RULES
from commitvar.kinds.model import MODEL_RULES
from commitvar.kinds.other import OTHER_RULES
from commitvar.kinds.source import SOURCE_RULES

ALL_RULES: Dict[FileKind, LineRules] = {
    FileKind.MODEL: MODEL_RULES,
    FileKind.BUILD: BUILD_RULES,
    FileKind.SOURCE: SOURCE_RULES,
    FileKind.OTHER: OTHER_RULES,
}


def rules_for(kind: FileKind) -> LineRules:
    return ALL_RULES[kind]
