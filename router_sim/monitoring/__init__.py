"""Monitoring for the router core."""

from .metrics import MetricsCollector, RouterMetrics

__all__ = [
    "MetricsCollector",
    "RouterMetrics",
]
