"""Tab-separated reports: per-commit results, run summary, unanalyzed commits."""

from __future__ import annotations

from typing import Iterable, List

from commitvar.git.models import FileKind
from commitvar.results.models import CommitResult, RunSummary

RESULTS_HEADER = ("Date", "Commit", "CCF", "CCLAI", "CCLVI", "CBF", "CBLAI", "CBLVI", "CMF", "CMLAI", "CMLVI")

SUMMARY_HEADER = (
    "Counted Element",
    "Number of Commits",
    "Number of Changed Lines (artifact-specific)",
    "Number of Changed Lines (variability)",
)

# Column groups of a results row, in output order
_ROW_KINDS = (FileKind.SOURCE, FileKind.BUILD, FileKind.MODEL)

LEGEND = """\
Description:
CAv\t[C]ommits [Av]ailable: number of all commits input to this analysis
CAn\t[C]ommits [An]alyzed: number of commits actually analyzed
\t    Some commits may not be analyzed due to no file changes
CCAI\t[C]ommits [C]hanging [A]rtifact-specific [I]nformation: number of commits that change at least one line of
\t    a) help text in a variability model file (no variability information)
\t    b) general source code in a source code file (no variability information)
\t    c) the general build process definition in a build file (no variability information)
CCVI\t[C]ommits [C]hanging [V]ariability [I]nformation: number of commits that change at least one line defining
\t    a) configuration options, etc. in a variability model file (variability information)
\t    b) references to configuration options in a source code file (variability information)
\t    c) references to configuration options in a build file (variability information)
CCAVI\t[C]ommits [C]hanging [A]rtifact-specific and [V]ariability [I]nformation: number of commits that change both types of information (see CCAI and CCVI)
CML\t[C]hanged [M]odel [L]ines: number of changed model lines over all analyzed commits
CCL\t[C]hanged source [C]ode [L]ines: number of changed source code lines over all analyzed commits
CBL\t[C]hanged [B]uild process [L]ines: number of changed build process lines over all analyzed commits
"""


def _row(cells: Iterable[object]) -> str:
    return "\t".join(str(c) for c in cells) + "\n"


def result_row(result: CommitResult) -> List[str]:
    cells = [result.date or "", result.commit_id]
    for kind in _ROW_KINDS:
        totals = result.totals_for(kind)
        cells += [str(totals.files), str(totals.artifact_lines), str(totals.variability_lines)]
    return cells


def render_results(results: Iterable[CommitResult]) -> str:
    """One header line plus one line per analyzed commit."""
    parts = [_row(RESULTS_HEADER)]
    parts.extend(_row(result_row(r)) for r in results)
    return "".join(parts)


def render_summary(summary: RunSummary) -> str:
    model = summary.kind_lines[FileKind.MODEL]
    source = summary.kind_lines[FileKind.SOURCE]
    build = summary.kind_lines[FileKind.BUILD]
    lines = [
        _row(SUMMARY_HEADER),
        _row(("CAv", summary.commits_available)),
        _row(("CAn", summary.commits_analyzed)),
        _row(("CCAI", summary.artifact_only_commits, summary.artifact_only_lines)),
        _row(("CCVI", summary.variability_only_commits, "", summary.variability_only_lines)),
        _row(("CCAVI", summary.mixed_commits, summary.mixed_artifact_lines, summary.mixed_variability_lines)),
        _row(("CML", "", model.artifact_lines, model.variability_lines)),
        _row(("CCL", "", source.artifact_lines, source.variability_lines)),
        _row(("CBL", "", build.artifact_lines, build.variability_lines)),
        "\n\n",
        LEGEND,
    ]
    return "".join(lines)


def render_unanalyzed(names: Iterable[str]) -> str:
    return "".join(f"{name}\n" for name in names)
