"""Data models for the router core."""

from .interface import Interface, AdminState
from .packet import Packet
from .decision import Decision, DecisionKind, Forward, NoRoute, UnresolvedNextHop
from .scenario import (
    ScenarioConfig,
    RouterConfig,
    InterfaceConfig,
    StaticRouteConfig,
    ArpEntryConfig,
    OspfConfig,
    PacketConfig,
)

__all__ = [
    "Interface",
    "AdminState",
    "Packet",
    "Decision",
    "DecisionKind",
    "Forward",
    "NoRoute",
    "UnresolvedNextHop",
    "ScenarioConfig",
    "RouterConfig",
    "InterfaceConfig",
    "StaticRouteConfig",
    "ArpEntryConfig",
    "OspfConfig",
    "PacketConfig",
]
