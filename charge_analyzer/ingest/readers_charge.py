from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import math
import re

import numpy as np

from charge_analyzer.models.frames import ChargeDataset


# Optional sign, ASCII digits with optional fraction (or a bare fraction), optional exponent.
_FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# ASCII whitespace only; NBSP and other Unicode spaces are part of the token.
_ASCII_WHITESPACE = " \t\n\r\f\v"


class FileOpenError(OSError):
    """Raised when a measurement file cannot be opened for reading."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Could not open file: {self.path}."
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


@dataclass(frozen=True)
class ChargeReaderConfig:
    """
    Reader configuration for charge data files.

    encoding:
      Text encoding used to open the file.
    decode_errors:
      Error handler passed to open(). The default "replace" turns undecodable
      bytes into U+FFFD so the affected line fails validation instead of
      aborting the whole load.
    """
    encoding: str = "utf-8"
    decode_errors: str = "replace"


def parse_measurement(line: str) -> Optional[float]:
    """
    Parse one line as a charge measurement.

    Returns the value, or None when the line is not a valid measurement:
      - after trimming ASCII whitespace, the line must be exactly one base-10
        float literal of ASCII digits (no trailing tokens,
        no 'nan'/'inf' words)
      - the value must be finite and >= 0
    """
    token = line.strip(_ASCII_WHITESPACE)
    if not _FLOAT_LITERAL.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value) or value < 0.0:
        return None
    return value


def _corrupt_point_message(path: Path, line_no: int) -> str:
    return f"File: {path} has a corrupt data point (line {line_no}). Skipping that data point."


class ChargeReader:
    """
    Reader for plain-text charge data files.

    Contract:
      - One value per line; surrounding whitespace is ignored.
      - Lines that are blank, non-numeric, negative or carry extra tokens are
        skipped and reported in ChargeDataset.warnings.
      - File order of the accepted values is preserved.
    """

    def __init__(self, config: Optional[ChargeReaderConfig] = None):
        self.config = config or ChargeReaderConfig()

    def read(self, file_path: str | Path) -> ChargeDataset:
        path = Path(file_path).expanduser()
        cfg = self.config

        values: List[float] = []
        skipped: List[int] = []
        warnings: List[str] = []
        n_lines = 0

        try:
            fh = path.open("r", encoding=cfg.encoding, errors=cfg.decode_errors)
        except OSError as e:
            raise FileOpenError(path, e.strerror or type(e).__name__) from e

        with fh:
            for n_lines, raw_line in enumerate(fh, start=1):
                value = parse_measurement(raw_line)
                if value is None:
                    skipped.append(n_lines)
                    warnings.append(_corrupt_point_message(path, n_lines))
                    continue
                values.append(value)

        arr = np.asarray(values, dtype=np.float64)
        arr.setflags(write=False)

        return ChargeDataset(
            source_path=path,
            values=arr,
            n_lines=int(n_lines),
            skipped_lines=tuple(skipped),
            warnings=tuple(warnings),
        )


def load(file_path: str | Path, config: Optional[ChargeReaderConfig] = None) -> ChargeDataset:
    """Load and validate one charge data file (see ChargeReader)."""
    return ChargeReader(config).read(file_path)
