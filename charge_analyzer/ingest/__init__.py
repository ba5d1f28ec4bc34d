"""Ingest package - reading and validating charge data files.

This package handles:
- Opening a measurement file with scoped acquisition
- Validating each line as a single non-negative base-10 float literal
- Recording corrupt data points as diagnostics instead of failing

Key classes:
- ChargeReader: Reads one file into a ChargeDataset
- ChargeReaderConfig: Text decoding options

Design principle:
- Readers produce validated, immutable ChargeDataset objects
- An unreadable file raises FileOpenError; the caller decides what happens next
"""

from .readers_charge import (
    ChargeReader,
    ChargeReaderConfig,
    FileOpenError,
    load,
    parse_measurement,
)

__all__ = [
    "ChargeReader",
    "ChargeReaderConfig",
    "FileOpenError",
    "load",
    "parse_measurement",
]
