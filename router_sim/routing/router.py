"""Router composition root."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..models.interface import Interface
from ..models.packet import Packet
from ..models.decision import Decision
from ..monitoring.metrics import MetricsCollector
from .arp import AddressResolutionTable
from .neighbors import NeighborGraph
from .spf import RouteComputer, SpfResult
from .table import ForwardingTable
from .forwarding import ForwardingEngine


logger = logging.getLogger(__name__)


@dataclass
class OspfNetwork:
    """An OSPF network statement."""
    area: str
    network: str


class Router:
    """
    A single routing node.

    Owns its interfaces, ARP table, neighbor costs and forwarding table.
    Nothing here refers to another Router object; remote routers are
    known only by name through configured neighbor costs. Neighbor costs
    and interfaces are independent inputs and are not cross-checked.
    """

    def __init__(self, name: str, metrics: Optional[MetricsCollector] = None):
        """
        Initialize router.

        Args:
            name: Router identity
            metrics: Metrics collector (creates one if None)
        """
        self.name = name
        self._interfaces: Dict[str, Interface] = {}
        self.arp_table = AddressResolutionTable()
        self.neighbors = NeighborGraph(name)
        self.forwarding_table = ForwardingTable(name)
        self.engine = ForwardingEngine(name, self.forwarding_table, self.arp_table)
        self.route_computer = RouteComputer(name, self.neighbors)
        self.ospf_networks: List[OspfNetwork] = []
        self.metrics = metrics or MetricsCollector(name)

    @property
    def interfaces(self) -> List[Interface]:
        return list(self._interfaces.values())

    def get_interface(self, name: str) -> Optional[Interface]:
        return self._interfaces.get(name)

    def add_interface(self, interface: Interface):
        """Attach an interface. A repeated name replaces the earlier one."""
        self._interfaces[interface.name] = interface
        logger.info(
            f"{self.name}: interface {interface.name} ({interface.link_address}) "
            f"{interface.state.value}"
        )
        self._update_table_metrics()

    def add_neighbor(self, name: str, cost: int):
        """
        Add or update a neighbor link cost.

        Args:
            name: Neighbor router identity
            cost: Link cost
        """
        self.neighbors.add(name, cost)
        self._update_table_metrics()

    def add_arp_entry(self, network_address: str, link_address: str):
        """Add or overwrite an ARP entry."""
        self.arp_table.put(network_address, link_address)
        self._update_table_metrics()

    def get_link_address(self, network_address: str) -> Optional[str]:
        """Resolve a network address through the ARP table."""
        return self.arp_table.lookup(network_address)

    def add_route(self, destination: str, next_hop: str):
        """
        Insert a static route, bypassing route computation.

        Args:
            destination: Destination network
            next_hop: Next hop address
        """
        self.forwarding_table.add_route(destination, next_hop)
        self.metrics.update_routing_metrics(self.forwarding_table.get_stats())

    def compute_routes(self) -> SpfResult:
        """
        Run shortest path first over the neighbor costs and install the result.

        Computed entries overwrite existing entries for the same
        destination and leave all others in place. The stored next hop is
        the predecessor in the shortest path tree, which is this router
        itself for every directly attached neighbor.

        Returns:
            The shortest path result
        """
        logger.info(f"{self.name}: computing shortest paths over {len(self.neighbors)} neighbors")

        result = self.route_computer.compute()
        installed = self.forwarding_table.install_computed(result.next_hops())

        self.metrics.record_route_computation()
        self.metrics.update_routing_metrics(self.forwarding_table.get_stats())

        logger.info(f"{self.name}: installed {installed} computed routes")
        return result

    def configure_ospf(self, area: str, network: str) -> SpfResult:
        """
        Record an OSPF network statement and populate the forwarding table.

        Args:
            area: OSPF area identifier
            network: Network advertised in the area

        Returns:
            The shortest path result
        """
        self.ospf_networks.append(OspfNetwork(area=area, network=network))
        logger.info(f"{self.name}: OSPF network {network} area {area}")
        return self.compute_routes()

    def forward_packet(self, packet: Packet) -> Decision:
        """
        Evaluate a packet and report the forwarding decision.

        Args:
            packet: Packet to evaluate

        Returns:
            Forward, NoRoute or UnresolvedNextHop
        """
        decision = self.engine.forward(packet)
        self.metrics.record_decision(decision)
        return decision

    def show_routing_table(self) -> List[Tuple[str, str]]:
        """Get (destination, next_hop) rows in insertion order."""
        return [(r.destination, r.next_hop) for r in self.forwarding_table.get_all_routes()]

    def show_arp_table(self) -> List[Tuple[str, str]]:
        """Get (network_address, link_address) rows in insertion order."""
        return self.arp_table.entries()

    def _update_table_metrics(self):
        self.metrics.update_table_metrics(
            arp_entries=len(self.arp_table),
            neighbors=len(self.neighbors),
            interfaces=len(self._interfaces),
            interfaces_up=sum(1 for i in self._interfaces.values() if i.is_up)
        )

    def get_stats(self) -> dict:
        """Get router statistics."""
        return {
            "name": self.name,
            "interfaces": [i.name for i in self.interfaces],
            "neighbors": dict(self.neighbors.items()),
            "arp_entries": len(self.arp_table),
            "routing_table": self.forwarding_table.get_stats(),
            "ospf_networks": [(n.area, n.network) for n in self.ospf_networks],
        }
