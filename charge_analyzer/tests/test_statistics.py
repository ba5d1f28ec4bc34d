"""Tests for the descriptive statistics.

Covers:
- mean / sample standard deviation on the reference three-point dataset
- both standard error formulas
- strict vs non-strict handling of too few samples
- summarize_dataset building a ResultRecord
"""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np
import pytest

from charge_analyzer.analysis.statistics import (
    InsufficientDataError,
    StatisticsConfig,
    compute_mean,
    compute_standard_deviation,
    compute_standard_error_of_mean,
    summarize_dataset,
)
from charge_analyzer.models.frames import ChargeDataset


def _dataset(values, path: str = "<test>", skipped=()) -> ChargeDataset:
    arr = np.asarray(values, dtype=np.float64)
    arr.setflags(write=False)
    return ChargeDataset(
        source_path=Path(path),
        values=arr,
        n_lines=arr.size + len(skipped),
        skipped_lines=tuple(skipped),
        warnings=tuple(f"skipped line {i}" for i in skipped),
    )


def test_reference_dataset() -> None:
    data = [1.0, 2.0, 3.0]
    mean = compute_mean(data)
    assert mean == pytest.approx(2.0)
    std = compute_standard_deviation(data, mean)
    assert std == pytest.approx(1.0)
    sem = compute_standard_error_of_mean(mean, len(data))
    assert sem == pytest.approx(2.0 / math.sqrt(3.0))
    assert sem == pytest.approx(1.1547, abs=1e-4)


def test_conventional_standard_error_uses_std() -> None:
    sem = compute_standard_error_of_mean(2.0, 4, standard_deviation=1.0, mode="conventional")
    assert sem == pytest.approx(0.5)


def test_conventional_standard_error_needs_std() -> None:
    with pytest.raises(ValueError):
        compute_standard_error_of_mean(2.0, 4, mode="conventional")


def test_unknown_sem_mode_rejected() -> None:
    with pytest.raises(ValueError):
        compute_standard_error_of_mean(2.0, 4, mode="robust")
    with pytest.raises(ValueError):
        summarize_dataset(_dataset([1.0, 2.0]), StatisticsConfig(sem_mode="robust"))


def test_accepts_dataset_and_array() -> None:
    ds = _dataset([1.0, 3.0])
    assert compute_mean(ds) == compute_mean(np.array([1.0, 3.0]))


def test_rejects_2d_input() -> None:
    with pytest.raises(ValueError):
        compute_mean(np.ones((2, 2)))


def test_input_not_modified() -> None:
    x = np.array([4.0, 1.0, 7.0])
    before = x.copy()
    m = compute_mean(x)
    compute_standard_deviation(x, m)
    np.testing.assert_array_equal(x, before)


def test_empty_mean_strict_raises() -> None:
    with pytest.raises(InsufficientDataError) as ei:
        compute_mean([])
    assert ei.value.n_samples == 0
    assert ei.value.required == 1
    assert isinstance(ei.value, ValueError)


def test_single_sample_std_strict_raises() -> None:
    with pytest.raises(InsufficientDataError) as ei:
        compute_standard_deviation([5.0], 5.0)
    assert ei.value.n_samples == 1
    assert ei.value.required == 2


def test_non_strict_propagates_nan() -> None:
    assert math.isnan(compute_mean([], strict=False))
    assert math.isnan(compute_standard_deviation([5.0], 5.0, strict=False))
    sem = compute_standard_error_of_mean(float("nan"), 0, strict=False)
    assert math.isnan(sem)


def test_non_strict_zero_count_sem_is_inf() -> None:
    assert math.isinf(compute_standard_error_of_mean(1.0, 0, strict=False))


def test_summarize_dataset_legacy() -> None:
    ds = _dataset([1.0, 3.0], path="a.dat", skipped=(2,))
    rec = summarize_dataset(ds)
    assert rec.source_path == Path("a.dat")
    assert rec.sample_count == 2
    assert rec.n_skipped == 1
    assert rec.mean == pytest.approx(2.0)
    assert rec.standard_deviation == pytest.approx(math.sqrt(2.0))
    assert rec.standard_error_of_mean == pytest.approx(2.0 / math.sqrt(2.0))
    assert rec.sem_mode == "legacy"
    assert rec.warnings == ds.warnings


def test_summarize_dataset_conventional() -> None:
    rec = summarize_dataset(_dataset([1.0, 2.0, 3.0]), StatisticsConfig(sem_mode="conventional"))
    assert rec.standard_error_of_mean == pytest.approx(1.0 / math.sqrt(3.0))
    assert rec.sem_mode == "conventional"


def test_summarize_single_sample_strict_and_lenient() -> None:
    ds = _dataset([4.0])
    with pytest.raises(InsufficientDataError):
        summarize_dataset(ds)
    rec = summarize_dataset(ds, StatisticsConfig(strict=False))
    assert rec.mean == pytest.approx(4.0)
    assert math.isnan(rec.standard_deviation)
    assert rec.standard_error_of_mean == pytest.approx(4.0)


def test_summarize_insufficient_carries_load_diagnostics() -> None:
    ds = _dataset([4.0], path="b.dat", skipped=(1, 3))
    with pytest.raises(InsufficientDataError) as ei:
        summarize_dataset(ds)
    assert ei.value.source_path == Path("b.dat")
    assert ei.value.warnings == ds.warnings
    assert ei.value.statistic == "standard deviation"
    assert str(ei.value).startswith("b.dat: ")
