"""Local neighbor cost graph."""

import logging
from typing import Dict, Iterator, Tuple


logger = logging.getLogger(__name__)


class NeighborGraph:
    """
    A router's local view of adjacent routers and link costs.

    Only routers explicitly added are known. Symmetry is not enforced and
    costs are not checked.
    """

    def __init__(self, owner: str):
        """
        Initialize neighbor graph.

        Args:
            owner: Identity of the router owning this view
        """
        self.owner = owner
        # Neighbor name -> link cost
        self._costs: Dict[str, int] = {}

    def add(self, name: str, cost: int):
        """Add or update a neighbor cost."""
        self._costs[name] = cost
        logger.info(f"{self.owner}: neighbor {name} cost {cost}")

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(list(self._costs.items()))

    def __len__(self) -> int:
        return len(self._costs)

    def __contains__(self, name: object) -> bool:
        return name in self._costs
