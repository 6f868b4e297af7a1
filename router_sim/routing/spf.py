"""Shortest path first computation over the local neighbor view."""

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .neighbors import NeighborGraph


logger = logging.getLogger(__name__)


@dataclass
class SpfResult:
    """Outcome of one shortest path run."""
    root: str
    distances: Dict[str, float] = field(default_factory=dict)
    previous: Dict[str, Optional[str]] = field(default_factory=dict)

    def next_hops(self) -> List[Tuple[str, str, int]]:
        """
        Get (destination, next_hop, metric) for every reached vertex.

        The next hop is the predecessor in the shortest path tree, so for a
        directly attached neighbor it is the root itself.
        """
        return [
            (vertex, prev, int(self.distances[vertex]))
            for vertex, prev in self.previous.items()
            if prev is not None
        ]

    def unreachable(self) -> List[str]:
        """Get known vertices that were never reached."""
        return [
            vertex for vertex, dist in self.distances.items()
            if math.isinf(dist)
        ]


class RouteComputer:
    """
    Dijkstra search restricted to {root} plus the neighbor map keys.

    Edge costs always come from the root's own neighbor map, whichever
    vertex is being expanded. There is no flooded link-state database; a
    router only knows what it has been told about its adjacencies.
    """

    def __init__(self, root: str, neighbors: NeighborGraph):
        """
        Initialize route computer.

        Args:
            root: Identity of the computing router
            neighbors: The router's neighbor cost map
        """
        self.root = root
        self.neighbors = neighbors

    def compute(self) -> SpfResult:
        """
        Run the shortest path search.

        Returns:
            SpfResult with distances and predecessors
        """
        edges = list(self.neighbors.items())

        distances: Dict[str, float] = {name: math.inf for name, _ in edges}
        previous: Dict[str, Optional[str]] = {name: None for name, _ in edges}
        distances[self.root] = 0
        previous.setdefault(self.root, None)

        # Counter keeps equal-distance entries in push order
        counter = itertools.count()
        frontier = [(0, next(counter), self.root)]
        settled = set()

        while frontier:
            dist, _, current = heapq.heappop(frontier)
            if current in settled:
                continue
            settled.add(current)

            for neighbor, cost in edges:
                if neighbor in settled:
                    continue
                candidate = dist + cost
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(frontier, (candidate, next(counter), neighbor))

        result = SpfResult(root=self.root, distances=distances, previous=previous)

        unreachable = result.unreachable()
        if unreachable:
            logger.debug(f"{self.root}: unreachable in local view: {unreachable}")

        return result
