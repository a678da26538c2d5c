"""Connectivity index for an undirected graph with constant-time queries."""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Set


class ConnectivityIndex:
    """Undirected graph that keeps every connected component indexed.

    Each registered vertex maps to an integer cluster handle. Handles are
    never reused, so two vertices are connected exactly when their handles
    are equal. Linking merges clusters; unlinking a direct edge rebuilds the
    affected cluster by depth-first traversal.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[Hashable, Set[Hashable]] = {}
        self._membership: Dict[Hashable, int] = {}
        self._clusters: Dict[int, Set[Hashable]] = {}
        self._next_handle = 0

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)

    @property
    def cluster_count(self) -> int:
        return len(self._clusters)

    def link(self, a: Hashable, b: Hashable) -> None:
        """Add an undirected edge, creating either vertex on first mention."""

        self._adjacency.setdefault(a, set()).add(b)
        self._adjacency.setdefault(b, set()).add(a)

        handle_a = self._membership.get(a)
        handle_b = self._membership.get(b)

        if handle_a is None and handle_b is None:
            self._new_cluster({a, b})
        elif handle_a is not None and handle_b is not None:
            if handle_a != handle_b:
                self._absorb(handle_a, handle_b)
        elif handle_a is not None:
            self._join(b, handle_a)
        else:
            self._join(a, handle_b)

    def unlink(self, a: Hashable, b: Hashable) -> None:
        """Remove the edge between `a` and `b` if there is one."""

        if not self.connected(a, b):
            return
        # connected but only through other vertices
        if b not in self._adjacency[a]:
            return

        self._adjacency[a].discard(b)
        self._adjacency[b].discard(a)

        stale = self._clusters.pop(self._membership[a])
        for vertex in stale:
            del self._membership[vertex]

        self._rebuild(a)
        if b not in self._membership:
            self._rebuild(b)

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Return True when both vertices exist and share a cluster."""

        if a not in self._adjacency or b not in self._adjacency:
            return False
        return self._membership[a] == self._membership[b]

    def has_link(self, a: Hashable, b: Hashable) -> bool:
        return b in self._adjacency.get(a, ())

    def neighbors(self, vertex: Hashable) -> frozenset:
        return frozenset(self._adjacency.get(vertex, ()))

    def cluster_id(self, vertex: Hashable) -> int | None:
        return self._membership.get(vertex)

    def cluster_members(self, vertex: Hashable) -> frozenset:
        handle = self._membership.get(vertex)
        if handle is None:
            return frozenset()
        return frozenset(self._clusters[handle])

    def clusters(self) -> List[frozenset]:
        return [frozenset(members) for members in self._clusters.values()]

    def _new_cluster(self, members: Set[Hashable]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._clusters[handle] = members
        for vertex in members:
            self._membership[vertex] = handle
        return handle

    def _join(self, vertex: Hashable, handle: int) -> None:
        self._clusters[handle].add(vertex)
        self._membership[vertex] = handle

    def _absorb(self, survivor: int, absorbed: int) -> None:
        members = self._clusters.pop(absorbed)
        self._clusters[survivor].update(members)
        for vertex in members:
            self._membership[vertex] = survivor

    def _rebuild(self, start: Hashable) -> int:
        reached: Set[Hashable] = {start}
        stack = [start]
        while stack:
            vertex = stack.pop()
            for neighbor in self._adjacency[vertex]:
                if neighbor not in reached:
                    reached.add(neighbor)
                    stack.append(neighbor)
        return self._new_cluster(reached)
