"""Link tracker library initialization."""

from .structures import ConnectivityIndex
from .commands import Command, CommandKeywords, format_answer, parse_command
from .pipeline import LinkTracker, LinkTrackerConfig, LinkTrackerResult, LinkTrackerStats
from .runner import cluster_file, run_commands, run_commands_file
from .scenarios import SCENARIOS, get_scenario

__all__ = [
    "ConnectivityIndex",
    "Command",
    "CommandKeywords",
    "format_answer",
    "parse_command",
    "LinkTracker",
    "LinkTrackerConfig",
    "LinkTrackerResult",
    "LinkTrackerStats",
    "cluster_file",
    "run_commands",
    "run_commands_file",
    "SCENARIOS",
    "get_scenario",
]
