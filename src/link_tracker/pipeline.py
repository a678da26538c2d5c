"""Command processing pipeline around :class:ConnectivityIndex."""

from __future__ import annotations

import sys
import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, TextIO

import pandas as pd
from tqdm import tqdm

from .commands import CONNECTED, LINK, UNLINK, Command, CommandKeywords, format_answer, is_terminator, parse_command
from .structures import ConnectivityIndex


@dataclass
class LinkTrackerStats:
    """Summary metrics for a processed command stream."""

    total_lines: int
    commands_by_action: Dict[str, int]
    ignored_lines: int
    vertex_count: int
    cluster_count: int
    runtime_seconds: float


@dataclass
class LinkTrackerResult:
    """Result bundle returned by :meth:LinkTracker.run."""

    answers: List[bool]
    stats: LinkTrackerStats


@dataclass
class LinkTrackerConfig:
    """Configuration parameters for :class:LinkTracker."""

    keywords: CommandKeywords = field(default_factory=CommandKeywords)
    stop_on_blank: bool = True
    use_tqdm: bool = False
    verbose: bool = False
    source_column: str = "source"
    target_column: str = "target"


class LinkTracker:
    """Apply link, unlink and query commands to a connectivity index."""

    def __init__(self, config: LinkTrackerConfig | None = None, index: ConnectivityIndex | None = None) -> None:
        self.config = config or LinkTrackerConfig()
        self.index = index if index is not None else ConnectivityIndex()
        self._counter: defaultdict[str, int] = defaultdict(int)

    def execute(self, command: Command) -> bool | None:
        """Run one parsed command; queries return their answer."""

        self._counter[command.action] += 1
        if command.action == LINK:
            self.index.link(command.left, command.right)
            return None
        if command.action == UNLINK:
            self.index.unlink(command.left, command.right)
            return None
        if command.action == CONNECTED:
            return self.index.connected(command.left, command.right)
        raise ValueError(f"Unknown command action: '{command.action}'")

    def process_line(self, line: str) -> bool | None:
        command = parse_command(line, self.config.keywords)
        if command is None:
            self._counter["ignored"] += 1
            return None
        return self.execute(command)

    def run(self, lines: Iterable[str], out: TextIO | None = None) -> LinkTrackerResult:
        """Process `lines` until exhausted or, by default, until a blank line.

        Each query answer is written to `out` as soon as it is known.
        """

        start = time.time()
        self._counter.clear()
        self._log("Processing commands...")

        iterator: Iterable[str] = lines
        if self.config.use_tqdm:
            iterator = tqdm(lines, desc="   Commands", unit="line", file=sys.stderr)

        answers: List[bool] = []
        total_lines = 0
        for line in iterator:
            if self.config.stop_on_blank and is_terminator(line):
                break
            total_lines += 1
            answer = self.process_line(line)
            if answer is None:
                continue
            answers.append(answer)
            if out is not None:
                out.write(format_answer(answer) + "\n")
                out.flush()

        stats = LinkTrackerStats(
            total_lines=total_lines,
            commands_by_action={k: v for k, v in self._counter.items() if k != "ignored"},
            ignored_lines=self._counter["ignored"],
            vertex_count=len(self.index),
            cluster_count=self.index.cluster_count,
            runtime_seconds=time.time() - start,
        )
        self._log(f"   Lines read: {stats.total_lines} (ignored: {stats.ignored_lines})")
        self._log(f"   Commands: {stats.commands_by_action}")
        self._log(f"   Vertices: {stats.vertex_count}, clusters: {stats.cluster_count}")
        self._log(f"   Done in {stats.runtime_seconds:.2f}s")
        return LinkTrackerResult(answers=answers, stats=stats)

    def link_edges(self, dataframe: pd.DataFrame) -> int:
        """Link every row of an edge table and return the number of edges linked."""

        for column in (self.config.source_column, self.config.target_column):
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        t0 = time.time()
        self._log(f"Linking {len(dataframe)} edges...")
        sources = dataframe[self.config.source_column].fillna("").astype(str).tolist()
        targets = dataframe[self.config.target_column].fillna("").astype(str).tolist()

        pairs: Iterable = zip(sources, targets)
        if self.config.use_tqdm and sources:
            pairs = tqdm(pairs, total=len(sources), desc="   Linking Edges", unit="edge", file=sys.stderr)

        linked = 0
        for source, target in pairs:
            if not source or not target:
                continue
            self.index.link(source, target)
            linked += 1
        self._counter[LINK] += linked

        self._log(f"   Linked {linked} edges into {self.index.cluster_count} clusters.")
        self._log(f"   Done in {time.time() - t0:.2f}s")
        return linked

    def cluster_table(self) -> pd.DataFrame:
        """Return one row per vertex with its cluster number, size and degree.

        Clusters are numbered from 0 by decreasing size.
        """

        clusters = sorted(
            (sorted(members, key=str) for members in self.index.clusters()),
            key=lambda members: (-len(members), str(members[0])),
        )
        rows = []
        for cluster_id, members in enumerate(clusters):
            for vertex in members:
                rows.append(
                    {
                        "vertex": vertex,
                        "cluster_id": cluster_id,
                        "cluster_size": len(members),
                        "degree": len(self.index.neighbors(vertex)),
                    }
                )
        return pd.DataFrame(rows, columns=["vertex", "cluster_id", "cluster_size", "degree"])

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message, file=sys.stderr)


__all__ = [
    "LinkTracker",
    "LinkTrackerConfig",
    "LinkTrackerResult",
    "LinkTrackerStats",
]
