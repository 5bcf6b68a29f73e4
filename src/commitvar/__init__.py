"""commitvar: count variability-related changes in commit diffs."""

__version__ = "0.1.0"
