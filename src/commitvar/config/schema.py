"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class AnalysisConfig:
    # Extensions (without the dot) of files always treated as "other"
    extension_blacklist: List[str] = field(default_factory=lambda: ["lb"])


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    results_file: str = "commitvar_results.tsv"
    summary_file: str = "commitvar_summary.tsv"
    unanalyzed_file: str = "commitvar_unanalyzed.txt"


@dataclass
class LoggingConfig:
    warnings: bool = False
    debug: bool = False


@dataclass
class CommitVarConfig:
    version: str = "1.0"
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
