"""Rendering of ResultRecord objects for the console and for tabular export."""

from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

from charge_analyzer.models.results import ResultRecord


TABLE_COLUMNS = [
    "source_path",
    "sample_count",
    "n_skipped",
    "mean",
    "standard_deviation",
    "standard_error_of_mean",
    "sem_mode",
]


def format_record(record: ResultRecord) -> str:
    """Console block for one file (charges in coulomb)."""
    lines = [
        f"File read from: {record.source_path}",
        "    The computed mean is:",
        f"        ({record.mean:g} +/- {record.standard_error_of_mean:g})C",
        "    The computed standard deviation is:",
        f"        {record.standard_deviation:g}C",
    ]
    return "\n".join(lines)


def record_row(record: ResultRecord) -> Dict[str, object]:
    return {
        "source_path": str(record.source_path),
        "sample_count": int(record.sample_count),
        "n_skipped": int(record.n_skipped),
        "mean": float(record.mean),
        "standard_deviation": float(record.standard_deviation),
        "standard_error_of_mean": float(record.standard_error_of_mean),
        "sem_mode": record.sem_mode,
    }


def results_table(records: Iterable[ResultRecord]) -> pd.DataFrame:
    """One row per record, columns in TABLE_COLUMNS order."""
    rows: List[Dict[str, object]] = [record_row(r) for r in records]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
