"""Load scenarios from JSON and build routers from them."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

from pydantic import ValidationError

from ..models import Interface, Packet, Decision
from ..models.scenario import (
    ScenarioConfig,
    RouterConfig,
    InterfaceConfig,
    StaticRouteConfig,
    ArpEntryConfig,
    OspfConfig,
    PacketConfig,
)
from ..routing import Router

logger = logging.getLogger(__name__)


class ScenarioError(ValueError):
    """Scenario file could not be read or is invalid."""


def load_scenario(path: Union[str, Path]) -> ScenarioConfig:
    """
    Load and validate a scenario file.

    Args:
        path: Path to a JSON scenario

    Returns:
        Validated scenario

    Raises:
        ScenarioError: If the file is unreadable, not JSON, or invalid
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ScenarioError(f"cannot read scenario {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ScenarioError(f"scenario {path} is not valid JSON: {e}") from e

    try:
        scenario = ScenarioConfig.model_validate(data)
    except ValidationError as e:
        raise ScenarioError(f"invalid scenario {path}: {e}") from e

    logger.info(f"Loaded scenario {scenario.name} with {len(scenario.routers)} routers")
    return scenario


def build_router(config: RouterConfig) -> Router:
    """
    Build one router from its configuration.

    Order: interfaces, neighbors, static routes, ARP entries, then OSPF
    (which runs route computation over the configured neighbors).
    """
    router = Router(config.name)

    for iface_config in config.interfaces:
        interface = Interface(name=iface_config.name, link_address=iface_config.link_address)
        if iface_config.network_address is not None:
            interface.configure(iface_config.network_address, iface_config.mask)
        router.add_interface(interface)

    for neighbor, cost in config.neighbors.items():
        router.add_neighbor(neighbor, cost)

    for route in config.routes:
        router.add_route(route.destination, route.next_hop)

    for entry in config.arp:
        router.add_arp_entry(entry.network_address, entry.link_address)

    if config.ospf is not None:
        router.configure_ospf(config.ospf.area, config.ospf.network)

    return router


def build_routers(scenario: ScenarioConfig) -> Dict[str, Router]:
    """Build every router in a scenario, keyed by name."""
    return {config.name: build_router(config) for config in scenario.routers}


def forward_packets(
    scenario: ScenarioConfig,
    routers: Dict[str, Router]
) -> List[Tuple[PacketConfig, Decision]]:
    """
    Evaluate each scenario packet at its ingress router.

    Returns:
        (packet config, decision) pairs in scenario order
    """
    results = []
    for packet_config in scenario.packets:
        packet = Packet(
            source=packet_config.source,
            destination=packet_config.destination,
            payload=packet_config.payload
        )
        decision = routers[packet_config.router].forward_packet(packet)
        results.append((packet_config, decision))
    return results


def default_scenario() -> ScenarioConfig:
    """
    Two routers with static routes and ARP entries.

    Packets are addressed to hosts while routes name networks, so both
    demo packets end in NoRoute under exact destination matching.
    """
    return ScenarioConfig(
        name="two-routers",
        routers=[
            RouterConfig(
                name="Router1",
                interfaces=[
                    InterfaceConfig(
                        name="GigabitEthernet0/0",
                        link_address="00:1A:2B:3C:4D:5E",
                        network_address="192.168.1.1",
                        mask="255.255.255.0"
                    ),
                    InterfaceConfig(
                        name="GigabitEthernet0/1",
                        link_address="00:1A:2B:3C:4D:5F",
                        network_address="192.168.2.1",
                        mask="255.255.255.0"
                    ),
                ],
                routes=[StaticRouteConfig(destination="192.168.3.0/24", next_hop="192.168.2.2")],
                arp=[ArpEntryConfig(network_address="192.168.2.2", link_address="00:1A:2B:3C:4D:6A")],
                ospf=OspfConfig(area="0", network="192.168.1.0/24"),
            ),
            RouterConfig(
                name="Router2",
                interfaces=[
                    InterfaceConfig(
                        name="GigabitEthernet0/0",
                        link_address="00:1A:2B:3C:4D:6A",
                        network_address="192.168.3.1",
                        mask="255.255.255.0"
                    ),
                    InterfaceConfig(
                        name="GigabitEthernet0/1",
                        link_address="00:1A:2B:3C:4D:6B",
                        network_address="192.168.4.1",
                        mask="255.255.255.0"
                    ),
                ],
                routes=[StaticRouteConfig(destination="192.168.1.0/24", next_hop="192.168.4.2")],
                arp=[ArpEntryConfig(network_address="192.168.4.2", link_address="00:1A:2B:3C:4D:5F")],
                ospf=OspfConfig(area="0", network="192.168.3.0/24"),
            ),
        ],
        packets=[
            PacketConfig(
                router="Router1",
                source="192.168.1.2",
                destination="192.168.3.4",
                payload="Hello from Router1"
            ),
            PacketConfig(
                router="Router2",
                source="192.168.3.4",
                destination="192.168.1.2",
                payload="Hello from Router2"
            ),
        ],
    )
