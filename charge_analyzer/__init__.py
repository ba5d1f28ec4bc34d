"""Charge Analyzer -- descriptive statistics for charge-measurement data files.

This package provides tools for:
- Ingesting plain-text measurement files (one charge reading per line)
- Validating each reading and skipping corrupt data points with a diagnostic
- Computing the mean, sample standard deviation and standard error of the mean
- Rendering per-file results on the console or as a pandas summary table

Key principles:
- One immutable dataset per loaded file; nothing is shared between files
- Corrupt lines never abort a load; an unreadable file always does
- Full traceability: skipped lines are recorded and reported

Main subpackages:
- ingest: File reader and line validation
- models: Data models (ChargeDataset, ResultRecord)
- analysis: Statistics, per-file pipeline, result rendering
- scripts: Command-line entry point and interactive prompts
"""

__all__ = []
