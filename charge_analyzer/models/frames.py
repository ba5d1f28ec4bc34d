from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class ChargeDataset:
    """
    In-memory representation of one charge data file after validation.

    Notes
    - 'values' is always a read-only 1D float64 array in file order.
    - every entry of 'values' is finite and >= 0.
    - 'skipped_lines' holds the 1-based line numbers rejected during loading.
    """
    source_path: Path
    values: np.ndarray
    n_lines: int
    skipped_lines: Tuple[int, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def n_samples(self) -> int:
        return int(self.values.size)

    @property
    def n_skipped(self) -> int:
        return len(self.skipped_lines)
