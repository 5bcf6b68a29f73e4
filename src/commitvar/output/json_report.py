"""JSON reporter for pipelines consuming the run summary."""

from __future__ import annotations

import json
from typing import Any, Dict

from commitvar.results.models import COUNTED_KINDS, RunSummary


def to_dict(summary: RunSummary) -> Dict[str, Any]:
    """Convert a RunSummary to a JSON-serialisable dict."""
    kinds: Dict[str, Dict[str, int]] = {}
    for kind in COUNTED_KINDS:
        counts = summary.kind_lines[kind]
        kinds[kind.value] = {
            "artifact_lines": counts.artifact_lines,
            "variability_lines": counts.variability_lines,
            "added": counts.added,
            "deleted": counts.deleted,
            "added_variability": counts.added_var,
            "deleted_variability": counts.deleted_var,
        }

    return {
        "version": "1.0",
        "commits_available": summary.commits_available,
        "commits_analyzed": summary.commits_analyzed,
        "commits_unanalyzed": summary.commits_unanalyzed,
        "artifact_only": {
            "commits": summary.artifact_only_commits,
            "artifact_lines": summary.artifact_only_lines,
        },
        "variability_only": {
            "commits": summary.variability_only_commits,
            "variability_lines": summary.variability_only_lines,
        },
        "mixed": {
            "commits": summary.mixed_commits,
            "artifact_lines": summary.mixed_artifact_lines,
            "variability_lines": summary.mixed_variability_lines,
        },
        "kinds": kinds,
        "unanalyzed": summary.unanalyzed,
    }


def render(summary: RunSummary) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(summary), indent=2)
