"""Convenience helpers for running the link tracker on files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from .pipeline import LinkTracker, LinkTrackerConfig, LinkTrackerResult


def run_commands_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Optional[LinkTrackerConfig] = None,
) -> LinkTrackerResult | None:
    """Run the commands in `input_path`, writing answers to `output_path` or stdout."""

    input_path = Path(input_path)
    try:
        # undecodable bytes stay part of the identifier instead of aborting the run
        handle = input_path.open(encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except OSError as exc:
        print(f"ERROR: Could not read '{input_path}': {exc}")
        return None

    with handle:
        return run_commands(handle, output_path, config)


def run_commands(
    lines: Iterable[str],
    output_path: str | Path | None = None,
    config: Optional[LinkTrackerConfig] = None,
) -> LinkTrackerResult | None:
    """Run `lines` as commands, writing answers to `output_path` or stdout."""

    tracker = LinkTracker(config)
    if output_path is None:
        return tracker.run(lines, sys.stdout)

    output_path = Path(output_path)
    try:
        out = output_path.open("w", encoding="utf-8")
    except OSError as exc:
        print(f"ERROR: Could not write answers to '{output_path}': {exc}")
        return None
    with out:
        return tracker.run(lines, out)


def cluster_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[LinkTrackerConfig] = None,
) -> pd.DataFrame | None:
    """Link every edge listed in `input_path` and write the per-vertex cluster table."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or LinkTrackerConfig()
    missing = [c for c in (config.source_column, config.target_column) if c not in dataframe.columns]
    if missing:
        print(f"ERROR: Column(s) {', '.join(repr(c) for c in missing)} not found in '{input_path}'.")
        return None

    tracker = LinkTracker(config)
    tracker.link_edges(dataframe)
    table = tracker.cluster_table()
    try:
        _save_dataframe(table, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
    if config.verbose:
        print(f"   Results saved to '{output_path}'", file=sys.stderr)
    return table


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str)
    raise ValueError("unsupported format")


def _save_dataframe(dataframe: pd.DataFrame, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
