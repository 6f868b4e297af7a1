"""Routing and forwarding layer."""

from .arp import AddressResolutionTable
from .neighbors import NeighborGraph
from .spf import RouteComputer, SpfResult
from .table import ForwardingTable, Route, RouteOrigin
from .forwarding import ForwardingEngine
from .router import Router, OspfNetwork

__all__ = [
    "AddressResolutionTable",
    "NeighborGraph",
    "RouteComputer",
    "SpfResult",
    "ForwardingTable",
    "Route",
    "RouteOrigin",
    "ForwardingEngine",
    "Router",
    "OspfNetwork",
]
