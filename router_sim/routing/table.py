"""Forwarding table management."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


logger = logging.getLogger(__name__)


class RouteOrigin(str, Enum):
    """How a route entered the table."""
    STATIC = "static"
    COMPUTED = "computed"


@dataclass
class Route:
    """Represents a route to a destination."""
    destination: str  # Destination network or router identity
    next_hop: str  # Next hop identity
    origin: RouteOrigin = RouteOrigin.STATIC
    metric: Optional[int] = None  # Path cost, for computed routes only


class ForwardingTable:
    """
    Maps destinations to next hops for one router.

    Static and computed entries share one table; whichever was written last
    for a destination wins.
    """

    def __init__(self, node_id: str):
        """
        Initialize forwarding table.

        Args:
            node_id: Local router identity
        """
        self.node_id = node_id

        # Forwarding table: destination -> Route
        self.routes: Dict[str, Route] = {}

    def add_route(self, destination: str, next_hop: str) -> Route:
        """
        Insert a static route, replacing any existing entry.

        Args:
            destination: Destination network
            next_hop: Next hop identity

        Returns:
            The installed route
        """
        route = Route(destination=destination, next_hop=next_hop)
        self.routes[destination] = route
        logger.info(f"{self.node_id}: static route {destination} via {next_hop}")
        return route

    def install_computed(self, entries: Iterable[Tuple[str, str, int]]) -> int:
        """
        Install computed routes over the current table.

        Args:
            entries: (destination, next_hop, metric) tuples

        Returns:
            Number of routes installed
        """
        count = 0
        for destination, next_hop, metric in entries:
            self.routes[destination] = Route(
                destination=destination,
                next_hop=next_hop,
                origin=RouteOrigin.COMPUTED,
                metric=metric
            )
            logger.debug(f"{self.node_id}: route {destination} via {next_hop} (metric={metric})")
            count += 1
        return count

    def get_route(self, destination: str) -> Optional[Route]:
        """
        Get route to destination.

        Args:
            destination: Destination to look up

        Returns:
            Route if exists, None otherwise
        """
        return self.routes.get(destination)

    def get_next_hop(self, destination: str) -> Optional[str]:
        """
        Get next hop for destination.

        Args:
            destination: Destination to look up

        Returns:
            Next hop identity, or None if no route
        """
        route = self.routes.get(destination)
        return route.next_hop if route else None

    def get_all_routes(self) -> List[Route]:
        """Get all routes."""
        return list(self.routes.values())

    def __len__(self) -> int:
        return len(self.routes)

    def get_stats(self) -> dict:
        """Get forwarding table statistics."""
        computed = [r for r in self.routes.values() if r.origin == RouteOrigin.COMPUTED]
        return {
            "total_routes": len(self.routes),
            "static_routes": len(self.routes) - len(computed),
            "computed_routes": len(computed),
            "destinations": list(self.routes.keys()),
            "avg_metric": sum(r.metric for r in computed) / max(len(computed), 1),
        }
