"""Analysis package.

Design principle:
  - Ingest produces validated :class:`~charge_analyzer.models.frames.ChargeDataset` objects.
  - Analysis consumes a ChargeDataset and produces a
    :class:`~charge_analyzer.models.results.ResultRecord`.

Each file is loaded, summarized and released before the next one is read.
"""

from .statistics import (
    InsufficientDataError,
    StatisticsConfig,
    compute_mean,
    compute_standard_deviation,
    compute_standard_error_of_mean,
    summarize_dataset,
)
from .pipeline import analyze_file, analyze_files, iter_results
from .summary import format_record, results_table

__all__ = [
    "InsufficientDataError",
    "StatisticsConfig",
    "compute_mean",
    "compute_standard_deviation",
    "compute_standard_error_of_mean",
    "summarize_dataset",
    "analyze_file",
    "analyze_files",
    "iter_results",
    "format_record",
    "results_table",
]
