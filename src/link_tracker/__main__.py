"""Command line entry point for the link tracker."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import LinkTrackerConfig, LinkTrackerStats
from .runner import cluster_file, run_commands, run_commands_file
from .scenarios import SCENARIOS, get_scenario


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Answer 'is linked' queries over a graph built from add/remove commands."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File of commands, one per line (default: read standard input)",
    )
    parser.add_argument("--output", type=Path, help="Where to write answers, or the cluster table with --edges")
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), help="Run a built-in command script")
    parser.add_argument("--edges", type=Path, help="CSV or Excel edge table to cluster instead of running commands")
    parser.add_argument(
        "--source-column",
        default=os.getenv("LINK_TRACKER_SOURCE_COLUMN", "source"),
        help="Edge table column holding the first endpoint (default: source)",
    )
    parser.add_argument(
        "--target-column",
        default=os.getenv("LINK_TRACKER_TARGET_COLUMN", "target"),
        help="Edge table column holding the second endpoint (default: target)",
    )
    parser.add_argument(
        "--no-stop-on-blank",
        dest="stop_on_blank",
        action="store_false",
        help="Keep reading past blank lines instead of stopping",
    )
    parser.add_argument("--verbose", action="store_true", help="Print progress messages to stderr")
    parser.add_argument("--disable-tqdm", action="store_true", help="Disable progress bars")
    parser.add_argument("--stats", action="store_true", help="Print a summary of the run to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = LinkTrackerConfig(
        stop_on_blank=args.stop_on_blank,
        # progress bars would interleave with answers in interactive use
        use_tqdm=not args.disable_tqdm and (args.verbose or args.edges is not None),
        verbose=args.verbose,
        source_column=args.source_column,
        target_column=args.target_column,
    )

    if args.edges is not None:
        if args.output is None:
            print("ERROR: --edges requires --output.")
            return 1
        return 0 if cluster_file(args.edges, args.output, config) is not None else 1

    if args.scenario is not None:
        result = run_commands(get_scenario(args.scenario), args.output, config)
    elif args.input is not None:
        result = run_commands_file(args.input, args.output, config)
    else:
        result = run_commands(sys.stdin, args.output, config)
    if result is None:
        return 1

    if args.stats:
        _print_stats(result.stats)
    return 0


def _print_stats(stats: LinkTrackerStats) -> None:
    print("--- Summary ---", file=sys.stderr)
    print(f"   - Lines processed: {stats.total_lines}", file=sys.stderr)
    print(f"   - Ignored lines: {stats.ignored_lines}", file=sys.stderr)
    for action, count in sorted(stats.commands_by_action.items()):
        print(f"   - {action}: {count}", file=sys.stderr)
    print(f"   - Vertices: {stats.vertex_count}", file=sys.stderr)
    print(f"   - Clusters: {stats.cluster_count}", file=sys.stderr)
    print(f"   - Runtime: {stats.runtime_seconds:.3f}s", file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
