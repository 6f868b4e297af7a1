"""Per-packet forwarding decisions."""

import logging

from ..models.packet import Packet
from ..models.decision import Decision, Forward, NoRoute, UnresolvedNextHop
from .arp import AddressResolutionTable
from .table import ForwardingTable


logger = logging.getLogger(__name__)


class ForwardingEngine:
    """
    Evaluates packets against the forwarding and ARP tables.

    Each call is independent: nothing is queued, retried or remembered.
    """

    def __init__(
        self,
        node_id: str,
        forwarding_table: ForwardingTable,
        arp_table: AddressResolutionTable
    ):
        """
        Initialize forwarding engine.

        Args:
            node_id: Local router identity
            forwarding_table: Table consulted for next hops
            arp_table: Table consulted for next hop link addresses
        """
        self.node_id = node_id
        self.forwarding_table = forwarding_table
        self.arp_table = arp_table

    def forward(self, packet: Packet) -> Decision:
        """
        Decide what to do with a packet.

        Args:
            packet: Packet to evaluate

        Returns:
            Forward, NoRoute or UnresolvedNextHop
        """
        destination = packet.destination

        # Look up route
        next_hop = self.forwarding_table.get_next_hop(destination)
        if next_hop is None:
            logger.warning(f"{self.node_id}: no route to destination {destination}")
            return NoRoute(destination=destination)

        # Resolve next hop
        link_address = self.arp_table.lookup(next_hop)
        if link_address is None:
            logger.warning(f"{self.node_id}: no link address for next hop {next_hop}")
            return UnresolvedNextHop(next_hop=next_hop)

        logger.debug(
            f"{self.node_id}: forwarding {packet.source} -> {destination} "
            f"via {next_hop} ({link_address})"
        )
        return Forward(destination=destination, next_hop=next_hop, link_address=link_address)
