"""Tests for the command line interface."""

import json

from click.testing import CliRunner

from router_sim.cli.main import cli


SCENARIO = {
    "name": "cli",
    "routers": [
        {
            "name": "R1",
            "neighbors": {"N1": 1},
            "routes": [{"destination": "10.0.0.0/24", "next_hop": "192.168.1.2"}],
            "arp": [{"network_address": "192.168.1.2", "link_address": "AA:BB:CC:DD:EE:FF"}],
            "ospf": {"network": "192.168.1.0/24"}
        }
    ],
    "packets": [
        {"router": "R1", "source": "192.168.1.5", "destination": "10.0.0.0/24"},
        {"router": "R1", "source": "192.168.1.5", "destination": "N1"}
    ]
}


def _scenario_file(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(SCENARIO))
    return str(path)


def test_run_text(tmp_path):
    """Test decisions printed as text."""
    result = CliRunner().invoke(cli, ["run", _scenario_file(tmp_path)])

    assert result.exit_code == 0
    assert "Forwarding packet to 10.0.0.0/24 via next hop 192.168.1.2 with MAC AA:BB:CC:DD:EE:FF" in result.output
    assert "MAC address for next hop R1 not found." in result.output


def test_run_json(tmp_path):
    """Test decisions printed as JSON lines."""
    result = CliRunner().invoke(cli, ["run", _scenario_file(tmp_path), "--json"])

    assert result.exit_code == 0
    records = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert records[0]["kind"] == "forward"
    assert records[0]["link_address"] == "AA:BB:CC:DD:EE:FF"
    assert records[1]["kind"] == "unresolved_next_hop"
    assert records[1]["next_hop"] == "R1"


def test_tables(tmp_path):
    """Test routing and ARP table display."""
    result = CliRunner().invoke(cli, ["tables", _scenario_file(tmp_path), "--router", "R1"])

    assert result.exit_code == 0
    assert "Destination: 10.0.0.0/24 -> Next Hop: 192.168.1.2" in result.output
    assert "Destination: N1 -> Next Hop: R1" in result.output
    assert "IP Address: 192.168.1.2 -> MAC Address: AA:BB:CC:DD:EE:FF" in result.output


def test_tables_unknown_router(tmp_path):
    """Test selecting a router that does not exist."""
    result = CliRunner().invoke(cli, ["tables", _scenario_file(tmp_path), "--router", "R9"])
    assert result.exit_code == 1


def test_metrics(tmp_path):
    """Test Prometheus output."""
    result = CliRunner().invoke(cli, ["metrics", _scenario_file(tmp_path)])

    assert result.exit_code == 0
    assert 'router_packets_forwarded_total{router="R1"} 1' in result.output


def test_missing_scenario(tmp_path):
    """Test loading errors exit with status 1."""
    result = CliRunner().invoke(cli, ["run", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_demo():
    """Test the built-in demonstration."""
    result = CliRunner().invoke(cli, ["demo"])

    assert result.exit_code == 0
    assert "MAC address for 192.168.2.2: 00:1A:2B:3C:4D:6A" in result.output
    assert "No route to 192.168.3.4" in result.output
    assert "Destination: 192.168.3.0/24 -> Next Hop: 192.168.2.2" in result.output
    assert "Router2: network 192.168.3.0/24 area 0" in result.output
