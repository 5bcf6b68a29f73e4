"""File kinds: per-kind normalization and variability classification."""

from commitvar.kinds.base import LineRules
from commitvar.kinds.build import BUILD_RULES
from commitvar.kinds.model import MODEL_RULES
from commitvar.kinds.other import OTHER_RULES
from commitvar.kinds.registry import ALL_RULES, rules_for
from commitvar.kinds.source import SOURCE_RULES

__all__ = [
    "ALL_RULES",
    "BUILD_RULES",
    "LineRules",
    "MODEL_RULES",
    "OTHER_RULES",
    "SOURCE_RULES",
    "rules_for",
]
