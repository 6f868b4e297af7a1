"""Scenario loading and router construction."""

from .loader import (
    ScenarioError,
    load_scenario,
    build_router,
    build_routers,
    forward_packets,
    default_scenario,
)

__all__ = [
    "ScenarioError",
    "load_scenario",
    "build_router",
    "build_routers",
    "forward_packets",
    "default_scenario",
]
