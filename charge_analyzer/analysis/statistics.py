"""Descriptive statistics for charge datasets.

All functions are pure: they never modify their input and have no side effects.

Functions
---------
compute_mean
    Arithmetic mean, ``sum(x) / n``.
compute_standard_deviation
    Bessel-corrected sample standard deviation, ``sqrt(sum((x - mean)^2) / (n - 1))``.
compute_standard_error_of_mean
    Standard error of the mean.  ``mode="legacy"`` keeps the historical
    ``mean / sqrt(n)`` formula used by earlier releases of this tool;
    ``mode="conventional"`` uses ``standard_deviation / sqrt(n)``.
summarize_dataset
    Build a :class:`~charge_analyzer.models.results.ResultRecord` from a
    :class:`~charge_analyzer.models.frames.ChargeDataset`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from charge_analyzer.models.frames import ChargeDataset
from charge_analyzer.models.results import ResultRecord


SEM_MODES = ("legacy", "conventional")

ArrayLike = Union[np.ndarray, Sequence[float]]


class InsufficientDataError(ValueError):
    """Raised when a statistic is undefined for the number of samples available.

    When raised from :func:`summarize_dataset`, ``source_path`` and
    ``warnings`` carry the dataset's path and load diagnostics so the caller
    can still report the skipped lines.
    """

    def __init__(
        self,
        statistic: str,
        n_samples: int,
        required: int,
        *,
        source_path: Optional[Path] = None,
        warnings: Tuple[str, ...] = (),
    ) -> None:
        self.statistic = statistic
        self.n_samples = int(n_samples)
        self.required = int(required)
        self.source_path = source_path
        self.warnings = tuple(warnings)
        msg = f"{statistic} needs at least {self.required} sample(s), got {self.n_samples}"
        if source_path is not None:
            msg = f"{source_path}: {msg}"
        super().__init__(msg)


@dataclass(frozen=True)
class StatisticsConfig:
    """
    Statistics configuration.

    sem_mode:
      "legacy" (mean / sqrt(n)) or "conventional" (std / sqrt(n)).
    strict:
      True: raise InsufficientDataError when n < 1 (mean) or n < 2 (std).
      False: let the undefined result propagate as NaN/inf.
    """
    sem_mode: str = "legacy"
    strict: bool = True


def _as_1d(data: Union[ChargeDataset, ArrayLike]) -> np.ndarray:
    if isinstance(data, ChargeDataset):
        data = data.values
    x = np.asarray(data, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"Expected 1D data, got shape {x.shape}")
    return x


def compute_mean(data: Union[ChargeDataset, ArrayLike], *, strict: bool = True) -> float:
    """Arithmetic mean of *data*.

    Raises
    ------
    InsufficientDataError
        If *data* is empty and *strict* is True.  With ``strict=False`` an
        empty input yields NaN.
    """
    x = _as_1d(data)
    n = x.size
    if n < 1:
        if strict:
            raise InsufficientDataError("mean", n, 1)
        return float("nan")
    return float(np.sum(x) / n)


def compute_standard_deviation(
    data: Union[ChargeDataset, ArrayLike],
    mean: float,
    *,
    strict: bool = True,
) -> float:
    """Sample standard deviation of *data* around a precomputed *mean*.

    Uses the ``n - 1`` (Bessel) denominator.  For ``n == 1`` the result is
    undefined: strict mode raises, non-strict mode returns NaN (0/0) and, for
    ``n == 0``, NaN as well.
    """
    x = _as_1d(data)
    n = x.size
    if n < 2:
        if strict:
            raise InsufficientDataError("standard deviation", n, 2)
        return float("nan")
    total = float(np.sum((x - float(mean)) ** 2))
    return float(np.sqrt(total / float(n - 1)))


def compute_standard_error_of_mean(
    mean: float,
    count: int,
    *,
    standard_deviation: Optional[float] = None,
    mode: str = "legacy",
    strict: bool = True,
) -> float:
    """Standard error of the mean.

    Parameters
    ----------
    mean:
        Mean of the samples (numerator in ``"legacy"`` mode).
    count:
        Number of samples.
    standard_deviation:
        Required in ``"conventional"`` mode.
    mode:
        ``"legacy"`` reproduces ``mean / sqrt(count)``, the formula earlier
        versions of this tool reported.  ``"conventional"`` computes
        ``standard_deviation / sqrt(count)``.
    strict:
        Raise InsufficientDataError for ``count < 1`` instead of returning
        inf/NaN.
    """
    if mode not in SEM_MODES:
        raise ValueError(f"sem mode must be one of {SEM_MODES}, got {mode!r}")

    if mode == "legacy":
        numerator = float(mean)
    else:
        if standard_deviation is None:
            raise ValueError("standard_deviation is required for the conventional standard error")
        numerator = float(standard_deviation)

    n = int(count)
    if n < 1:
        if strict:
            raise InsufficientDataError("standard error of the mean", n, 1)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(numerator) / np.sqrt(np.float64(n)))
    return float(numerator / np.sqrt(float(n)))


def summarize_dataset(
    dataset: ChargeDataset,
    config: Optional[StatisticsConfig] = None,
) -> ResultRecord:
    """Compute mean, standard deviation and standard error for one dataset."""
    cfg = config or StatisticsConfig()
    if cfg.sem_mode not in SEM_MODES:
        raise ValueError(f"sem mode must be one of {SEM_MODES}, got {cfg.sem_mode!r}")

    n = dataset.n_samples
    try:
        mean = compute_mean(dataset, strict=cfg.strict)
        std = compute_standard_deviation(dataset, mean, strict=cfg.strict)
        sem = compute_standard_error_of_mean(
            mean,
            n,
            standard_deviation=std,
            mode=cfg.sem_mode,
            strict=cfg.strict,
        )
    except InsufficientDataError as e:
        raise InsufficientDataError(
            e.statistic,
            e.n_samples,
            e.required,
            source_path=dataset.source_path,
            warnings=dataset.warnings,
        ) from e

    return ResultRecord(
        source_path=dataset.source_path,
        mean=mean,
        standard_deviation=std,
        standard_error_of_mean=sem,
        sample_count=n,
        n_skipped=dataset.n_skipped,
        sem_mode=cfg.sem_mode,
        warnings=dataset.warnings,
    )
