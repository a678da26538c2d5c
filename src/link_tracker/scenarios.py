"""Built-in command scripts."""

from __future__ import annotations

from typing import Dict, List


def _many_pairs(count: int = 793) -> List[str]:
    # 793 disjoint pairs: add 1 2, add 3 4, ..., add 1585 1586
    return [f"add {2 * i + 1} {2 * i + 2}" for i in range(count)]


SCENARIOS: Dict[str, List[str]] = {
    "basic": [
        "add 1 2",
        "add 2 3",
        "add 3 4",
        "is linked 3 1",
        "remove 3 4",
        "is linked 1 4",
    ],
    "cycle": [
        "remove 1 2",
        "note: this shouldn't crash even though this line doesn't follow the format",
        "add 1 2",
        "add 2 3",
        "add 1 3",
        "add 3 4",
        "add 5 6",
        "is linked 1 1",
        "is linked 1 4",
        "is linked 5 6",
        "is linked 1 6",
        "remove 1 3",
        "is linked 4 1",
        "remove 5 6",
        "is linked 5 6",
    ],
    "large-ids": [
        "remove 10000000 20000000",
        "note: add 10000000 20000000 this shouldn't crash even though this line doesn't follow the0 format0",
        "add 10000000 20000000",
        "add 20000000 30000000",
        "add 10000000 30000000",
        "add 30000000 40000000",
        "add 50000000 60000000",
        "is linked 10000000 10000000",
        "is linked 10000000 40000000",
        "is linked 50000000 60000000",
        "is linked 10000000 60000000",
        "remove 10000000 30000000",
        "is linked 40000000 10000000",
        "remove 50000000 60000000",
        "is linked 50000000 60000000",
        "add 50000000 30000000",
        "is linked 50000000 40000000",
        "remove 30000000 40000000",
        "is linked 40000000 50000000",
        "remove 20000000 10000000",
        "is linked 10000000 40000000",
        "is linked 10000000 60000000",
        "is linked 20000000 30000000",
        "is linked 50000000 20000000",
    ],
    "many-pairs": _many_pairs(),
}


def get_scenario(name: str) -> List[str]:
    try:
        return list(SCENARIOS[name])
    except KeyError:
        raise KeyError(f"Unknown scenario '{name}'. Known scenarios: {', '.join(sorted(SCENARIOS))}") from None
