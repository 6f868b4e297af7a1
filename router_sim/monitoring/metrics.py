"""Metrics collection for Prometheus."""

import time
from dataclasses import dataclass, field
from typing import Dict
from collections import defaultdict

from ..models.decision import Decision, DecisionKind


@dataclass
class RouterMetrics:
    """Container for router metrics."""
    # Forwarding metrics
    packets_evaluated: int = 0
    packets_forwarded: int = 0
    packets_no_route: int = 0
    packets_unresolved: int = 0

    # Routing metrics
    route_computations: int = 0
    total_routes: int = 0
    static_routes: int = 0
    computed_routes: int = 0
    avg_route_metric: float = 0.0

    # Table metrics
    arp_entries: int = 0
    neighbors: int = 0
    interfaces: int = 0
    interfaces_up: int = 0

    last_update: float = field(default_factory=time.time)


class MetricsCollector:
    """
    Collects and exposes metrics for Prometheus.

    Tracks forwarding decisions and table sizes for one router.
    """

    def __init__(self, node_id: str):
        """
        Initialize metrics collector.

        Args:
            node_id: Local router identity
        """
        self.node_id = node_id
        self.metrics = RouterMetrics()

        # Drops per destination (no route) or next hop (unresolved)
        self.drops_by_key: Dict[str, int] = defaultdict(int)

    def record_decision(self, decision: Decision):
        """Record the outcome of one forwarding decision."""
        self.metrics.packets_evaluated += 1

        if decision.kind == DecisionKind.FORWARD:
            self.metrics.packets_forwarded += 1
        elif decision.kind == DecisionKind.NO_ROUTE:
            self.metrics.packets_no_route += 1
            self.drops_by_key[decision.destination] += 1
        else:
            self.metrics.packets_unresolved += 1
            self.drops_by_key[decision.next_hop] += 1

        self.metrics.last_update = time.time()

    def record_route_computation(self):
        """Record a shortest path run."""
        self.metrics.route_computations += 1

    def update_routing_metrics(self, stats: dict):
        """Update routing metrics from forwarding table stats."""
        self.metrics.total_routes = stats["total_routes"]
        self.metrics.static_routes = stats["static_routes"]
        self.metrics.computed_routes = stats["computed_routes"]
        self.metrics.avg_route_metric = stats["avg_metric"]
        self.metrics.last_update = time.time()

    def update_table_metrics(
        self,
        arp_entries: int,
        neighbors: int,
        interfaces: int,
        interfaces_up: int
    ):
        """Update table size metrics."""
        self.metrics.arp_entries = arp_entries
        self.metrics.neighbors = neighbors
        self.metrics.interfaces = interfaces
        self.metrics.interfaces_up = interfaces_up
        self.metrics.last_update = time.time()

    def get_metrics(self) -> RouterMetrics:
        """Get current metrics snapshot."""
        return self.metrics

    def to_prometheus(self) -> str:
        """
        Export metrics in Prometheus format.

        Returns:
            Prometheus-formatted metrics string
        """
        lines = []
        labels = f'{{router="{self.node_id}"}}'
        m = self.metrics

        # Forwarding metrics
        lines.append("# HELP router_packets_evaluated_total Packets evaluated by the forwarding engine")
        lines.append("# TYPE router_packets_evaluated_total counter")
        lines.append(f"router_packets_evaluated_total{labels} {m.packets_evaluated}")

        lines.append("# HELP router_packets_forwarded_total Packets with a resolved next hop")
        lines.append("# TYPE router_packets_forwarded_total counter")
        lines.append(f"router_packets_forwarded_total{labels} {m.packets_forwarded}")

        lines.append("# HELP router_packets_dropped_total Packets dropped by reason")
        lines.append("# TYPE router_packets_dropped_total counter")
        lines.append(
            f'router_packets_dropped_total{{router="{self.node_id}",reason="no_route"}} '
            f"{m.packets_no_route}"
        )
        lines.append(
            f'router_packets_dropped_total{{router="{self.node_id}",reason="unresolved_next_hop"}} '
            f"{m.packets_unresolved}"
        )

        lines.append("# HELP router_packet_drops_by_key_total Drops per destination or next hop")
        lines.append("# TYPE router_packet_drops_by_key_total counter")
        for key, count in sorted(self.drops_by_key.items()):
            lines.append(f'router_packet_drops_by_key_total{{router="{self.node_id}",key="{key}"}} {count}')

        # Routing metrics
        lines.append("# HELP router_route_computations_total Shortest path runs")
        lines.append("# TYPE router_route_computations_total counter")
        lines.append(f"router_route_computations_total{labels} {m.route_computations}")

        lines.append("# HELP router_routes_total Routes in the forwarding table")
        lines.append("# TYPE router_routes_total gauge")
        lines.append(f"router_routes_total{labels} {m.total_routes}")
        lines.append(f"router_routes_static{labels} {m.static_routes}")
        lines.append(f"router_routes_computed{labels} {m.computed_routes}")
        lines.append(f"router_route_metric_avg{labels} {m.avg_route_metric:.2f}")

        # Table metrics
        lines.append("# HELP router_arp_entries ARP table size")
        lines.append("# TYPE router_arp_entries gauge")
        lines.append(f"router_arp_entries{labels} {m.arp_entries}")
        lines.append(f"router_neighbors{labels} {m.neighbors}")
        lines.append(f"router_interfaces{labels} {m.interfaces}")
        lines.append(f"router_interfaces_up{labels} {m.interfaces_up}")

        lines.append("# HELP router_metrics_last_update_timestamp_seconds Last metrics update")
        lines.append("# TYPE router_metrics_last_update_timestamp_seconds gauge")
        lines.append(f"router_metrics_last_update_timestamp_seconds{labels} {m.last_update:.3f}")

        return "\n".join(lines) + "\n"

    def get_summary(self) -> dict:
        """Get human-readable metrics summary."""
        m = self.metrics
        return {
            "packets": {
                "evaluated": m.packets_evaluated,
                "forwarded": m.packets_forwarded,
                "no_route": m.packets_no_route,
                "unresolved_next_hop": m.packets_unresolved,
            },
            "routing": {
                "computations": m.route_computations,
                "total_routes": m.total_routes,
                "avg_metric": f"{m.avg_route_metric:.1f}",
            },
            "tables": {
                "arp_entries": m.arp_entries,
                "neighbors": m.neighbors,
                "interfaces": m.interfaces,
                "interfaces_up": m.interfaces_up,
            },
            "drops": dict(self.drops_by_key),
            "last_update": m.last_update,
        }
