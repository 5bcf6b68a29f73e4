"""Starter .commitvar.toml template."""

DEFAULT_TOML = """\
# commitvar configuration
version = "1.0"

[analysis]
extension_blacklist = ["lb"]   # files ending in these extensions are never counted

[output]
format = "terminal"            # terminal | json
show_summary = true
results_file = "commitvar_results.tsv"
summary_file = "commitvar_summary.tsv"
unanalyzed_file = "commitvar_unanalyzed.txt"

[logging]
warnings = false               # same as -w
debug = false                  # same as -d
"""
