"""Report writers: TSV files, JSON, rich terminal table."""
