"""Tests for scenario loading."""

import json

import pytest
from pydantic import ValidationError

from router_sim.config import (
    ScenarioError,
    load_scenario,
    build_routers,
    forward_packets,
    default_scenario,
)
from router_sim.models import (
    ScenarioConfig,
    RouterConfig,
    InterfaceConfig,
    NoRoute,
    Forward,
)


SCENARIO = {
    "name": "triangle",
    "routers": [
        {
            "name": "R1",
            "interfaces": [
                {
                    "name": "eth0",
                    "link_address": "00:1A:2B:3C:4D:5E",
                    "network_address": "192.168.1.1",
                    "mask": "24"
                }
            ],
            "neighbors": {"R2": 1, "R3": 4},
            "routes": [{"destination": "10.0.0.0/24", "next_hop": "192.168.1.2"}],
            "arp": [{"network_address": "192.168.1.2", "link_address": "AA:BB:CC:DD:EE:FF"}],
            "ospf": {"area": "0", "network": "192.168.1.0/24"}
        },
        {"name": "R2"}
    ],
    "packets": [
        {"router": "R1", "source": "192.168.1.5", "destination": "10.0.0.0/24"},
        {"router": "R2", "source": "192.168.1.5", "destination": "10.0.0.0/24"}
    ]
}


def _write(tmp_path, data):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(data))
    return path


def test_load_and_build(tmp_path):
    """Test a valid scenario builds configured routers."""
    scenario = load_scenario(_write(tmp_path, SCENARIO))
    routers = build_routers(scenario)

    r1 = routers["R1"]
    assert scenario.name == "triangle"
    assert r1.get_interface("eth0").is_up
    assert r1.get_interface("eth0").mask == "24"
    assert r1.forwarding_table.get_next_hop("R2") == "R1"
    assert r1.forwarding_table.get_next_hop("R3") == "R1"
    assert r1.ospf_networks[0].network == "192.168.1.0/24"

    results = forward_packets(scenario, routers)
    assert [decision for _, decision in results] == [
        Forward(destination="10.0.0.0/24", next_hop="192.168.1.2", link_address="AA:BB:CC:DD:EE:FF"),
        NoRoute(destination="10.0.0.0/24"),
    ]


def test_missing_file(tmp_path):
    """Test unreadable scenario."""
    with pytest.raises(ScenarioError):
        load_scenario(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    """Test malformed JSON."""
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    with pytest.raises(ScenarioError):
        load_scenario(path)


@pytest.mark.parametrize("mutate", [
    lambda d: d["routers"][0]["interfaces"][0].update(link_address="not-a-mac"),
    lambda d: d["routers"][0]["interfaces"][0].update(network_address="300.1.1.1"),
    lambda d: d["routers"][0]["interfaces"][0].update(mask="255.0.255.0"),
    lambda d: d["routers"][0]["interfaces"][0].update(mask="0.0.0.255"),
    lambda d: d["routers"][0]["interfaces"][0].update(network_address="2001:db8::1", mask="255.255.255.0"),
    lambda d: d["routers"][0]["interfaces"][0].update(mask="33"),
    lambda d: d["routers"][0]["neighbors"].update(R2=-1),
    lambda d: d["routers"][0]["routes"][0].update(destination="nowhere"),
    lambda d: d["routers"][1].update(name="R1"),
    lambda d: d["packets"][0].update(router="R9"),
])
def test_invalid_scenarios(tmp_path, mutate):
    """Test validation rejects malformed configuration."""
    data = json.loads(json.dumps(SCENARIO))
    mutate(data)

    with pytest.raises(ScenarioError):
        load_scenario(_write(tmp_path, data))


def test_duplicate_interface_names():
    """Test interface names must be unique per router."""
    iface = InterfaceConfig(name="eth0", link_address="00:00:00:00:00:01")

    with pytest.raises(ValidationError):
        RouterConfig(name="R", interfaces=[iface, iface])


def test_address_requires_mask():
    """Test network address and mask are given together."""
    with pytest.raises(ValidationError):
        InterfaceConfig(name="eth0", link_address="00:00:00:00:00:01", network_address="10.0.0.1")


def test_default_scenario():
    """Test the built-in two-router scenario."""
    scenario = default_scenario()
    routers = build_routers(scenario)

    assert isinstance(scenario, ScenarioConfig)
    assert set(routers) == {"Router1", "Router2"}
    assert routers["Router1"].get_link_address("192.168.2.2") == "00:1A:2B:3C:4D:6A"
    assert routers["Router1"].show_routing_table() == [("192.168.3.0/24", "192.168.2.2")]
    assert routers["Router2"].show_arp_table() == [("192.168.4.2", "00:1A:2B:3C:4D:5F")]

    decisions = [decision for _, decision in forward_packets(scenario, routers)]
    assert decisions == [
        NoRoute(destination="192.168.3.4"),
        NoRoute(destination="192.168.1.2"),
    ]


@pytest.mark.parametrize("address, mask", [
    ("192.168.1.1", "255.255.255.0"),
    ("192.168.1.1", "24"),
    ("2001:db8::1", "64"),
])
def test_valid_masks(address, mask):
    """Test netmasks and prefix lengths in the address family of the interface."""
    iface = InterfaceConfig(
        name="eth0",
        link_address="00:00:00:00:00:01",
        network_address=address,
        mask=mask
    )
    assert iface.mask == mask


def test_arp_entry_for_router_identity():
    """Test a computed route resolves through an ARP entry keyed by router name."""
    scenario = ScenarioConfig.model_validate({
        "routers": [
            {
                "name": "R1",
                "neighbors": {"N1": 1},
                "arp": [{"network_address": "R1", "link_address": "00:00:00:00:00:01"}],
                "ospf": {"network": "192.168.1.0/24"}
            }
        ],
        "packets": [{"router": "R1", "source": "s", "destination": "N1"}]
    })
    routers = build_routers(scenario)

    decisions = [decision for _, decision in forward_packets(scenario, routers)]
    assert decisions == [Forward(destination="N1", next_hop="R1", link_address="00:00:00:00:00:01")]
