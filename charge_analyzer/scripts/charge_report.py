"""
Command-line report for charge data files.

Loads each file in turn, prints the mean (with its standard error) and the
sample standard deviation, and optionally writes the per-file summary table
to CSV.

Examples
--------
    python -m charge_analyzer.scripts.charge_report millikan.dat run2.dat
    python -m charge_analyzer.scripts.charge_report --sem conventional --csv out.csv millikan.dat

With no FILE arguments the file names are asked for interactively.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from charge_analyzer.analysis.pipeline import iter_results
from charge_analyzer.analysis.statistics import SEM_MODES, InsufficientDataError, StatisticsConfig
from charge_analyzer.analysis.summary import format_record, results_table
from charge_analyzer.ingest.readers_charge import ChargeReader, FileOpenError
from charge_analyzer.models.results import ResultRecord, SkippedFile
from charge_analyzer.scripts.prompts import prompt_for_files


EXIT_OK = 0
EXIT_UNREADABLE = 1
EXIT_INSUFFICIENT = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m charge_analyzer.scripts.charge_report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compute mean, sample standard deviation and standard error of the mean
            for plain-text charge data files (one non-negative value per line).

            Corrupt lines are skipped with a warning. An unreadable file stops the
            run unless --skip-unreadable is given.
            """
        ),
    )

    p.add_argument("files", nargs="*", metavar="FILE", help="Data files to analyse (prompted for if omitted)")
    p.add_argument(
        "--sem",
        choices=SEM_MODES,
        default="legacy",
        help="Standard error formula: legacy = mean/sqrt(n), conventional = std/sqrt(n)",
    )
    p.add_argument("--skip-unreadable", action="store_true", help="Continue with the next file if one cannot be opened")
    p.add_argument(
        "--allow-insufficient",
        action="store_true",
        help="Report NaN/inf instead of failing when a file has fewer than 2 valid samples",
    )
    p.add_argument("--csv", default=None, help="Also write the summary table to this CSV file")
    p.add_argument("--quiet", action="store_true", help="Do not print corrupt-data-point warnings")

    ns = p.parse_args(list(argv) if argv is not None else None)

    print("Welcome to the charge calculator!")

    files: List[str] = list(ns.files)
    if not files:
        files = prompt_for_files()
    if not files:
        print("[error] no files to load.", file=sys.stderr)
        return EXIT_UNREADABLE

    stats_cfg = StatisticsConfig(sem_mode=ns.sem, strict=not ns.allow_insufficient)
    reader = ChargeReader()
    records: List[ResultRecord] = []

    def _print_warnings(warnings) -> None:
        if not ns.quiet:
            for w in warnings:
                print(f"[warn] {w}")

    try:
        for item in iter_results(
            files,
            reader=reader,
            stats_config=stats_cfg,
            skip_unreadable=ns.skip_unreadable,
        ):
            if isinstance(item, SkippedFile):
                print(f"[warn] skipped unreadable file: {item.source_path}")
                continue
            _print_warnings(item.warnings)
            print(format_record(item))
            records.append(item)
    except FileOpenError as e:
        print(f"[error] Could not open file: {e.path}.", file=sys.stderr)
        print("Exiting...", file=sys.stderr)
        return EXIT_UNREADABLE
    except InsufficientDataError as e:
        _print_warnings(e.warnings)
        print(f"[error] {e}", file=sys.stderr)
        return EXIT_INSUFFICIENT

    if ns.csv:
        out = Path(ns.csv).expanduser()
        results_table(records).to_csv(out, index=False)
        print(f"[info] wrote: {out}")

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
