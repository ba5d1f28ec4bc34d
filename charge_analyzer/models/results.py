from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class ResultRecord:
    """Descriptive statistics computed from a single ChargeDataset.

    Attributes
    ----------
    source_path:
        File the dataset was loaded from.
    mean, standard_deviation, standard_error_of_mean:
        Statistics in the units of the file (coulomb). May be NaN/inf when
        computed in non-strict mode on too few samples.
    sample_count:
        Number of valid samples that entered the statistics.
    n_skipped:
        Number of lines rejected while loading.
    sem_mode:
        Formula used for the standard error ("legacy" or "conventional").
    warnings:
        Diagnostics carried over from loading.
    """

    source_path: Path
    mean: float
    standard_deviation: float
    standard_error_of_mean: float
    sample_count: int

    n_skipped: int = 0
    sem_mode: str = "legacy"
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SkippedFile:
    """A requested file that could not be opened and was passed over."""

    source_path: Path
    reason: str = ""


@dataclass(frozen=True)
class BatchResult:
    """Outcome of analysing several files: one record per readable file, in order."""

    records: Tuple[ResultRecord, ...]
    skipped: Tuple[SkippedFile, ...] = ()
