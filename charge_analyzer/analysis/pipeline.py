from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from charge_analyzer.analysis.statistics import StatisticsConfig, summarize_dataset
from charge_analyzer.ingest.readers_charge import ChargeReader, FileOpenError
from charge_analyzer.models.results import BatchResult, ResultRecord, SkippedFile


def analyze_file(
    file_path: str | Path,
    *,
    reader: Optional[ChargeReader] = None,
    stats_config: Optional[StatisticsConfig] = None,
) -> ResultRecord:
    """Load one file and summarize it.

    The dataset only lives for the duration of this call.
    """
    rd = reader or ChargeReader()
    dataset = rd.read(file_path)
    return summarize_dataset(dataset, stats_config)


def iter_results(
    paths: Iterable[str | Path],
    *,
    reader: Optional[ChargeReader] = None,
    stats_config: Optional[StatisticsConfig] = None,
    skip_unreadable: bool = False,
) -> Iterator[Union[ResultRecord, SkippedFile]]:
    """Yield one entry per path, in order.

    Files are processed lazily: a file is only opened once the previous entry
    has been consumed.

    skip_unreadable:
      False: FileOpenError propagates and no further file is processed.
      True: an unreadable file yields a SkippedFile and processing continues.

    InsufficientDataError always propagates.
    """
    rd = reader or ChargeReader()
    for p in paths:
        try:
            rec = analyze_file(p, reader=rd, stats_config=stats_config)
        except FileOpenError as e:
            if not skip_unreadable:
                raise
            yield SkippedFile(source_path=e.path, reason=e.reason)
            continue
        yield rec


def analyze_files(
    paths: Iterable[str | Path],
    *,
    reader: Optional[ChargeReader] = None,
    stats_config: Optional[StatisticsConfig] = None,
    skip_unreadable: bool = False,
) -> BatchResult:
    """Eager form of :func:`iter_results`."""
    records: List[ResultRecord] = []
    skipped: List[SkippedFile] = []
    for item in iter_results(
        paths,
        reader=reader,
        stats_config=stats_config,
        skip_unreadable=skip_unreadable,
    ):
        if isinstance(item, SkippedFile):
            skipped.append(item)
        else:
            records.append(item)
    return BatchResult(records=tuple(records), skipped=tuple(skipped))
