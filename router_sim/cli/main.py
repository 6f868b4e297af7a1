"""Main CLI application for the router simulator."""

import json
import logging
import sys
from typing import Dict

import click

from ..config import ScenarioError, load_scenario, build_routers, forward_packets, default_scenario
from ..models import ScenarioConfig
from ..routing import Router

logger = logging.getLogger(__name__)


def _load_or_exit(path: str) -> ScenarioConfig:
    try:
        return load_scenario(path)
    except ScenarioError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


def _echo_routing_table(router: Router):
    click.echo(f"Routing Table ({router.name}):")
    for destination, next_hop in router.show_routing_table():
        click.echo(f"  Destination: {destination} -> Next Hop: {next_hop}")


def _echo_arp_table(router: Router):
    click.echo(f"ARP Table ({router.name}):")
    for address, link_address in router.show_arp_table():
        click.echo(f"  IP Address: {address} -> MAC Address: {link_address}")


def _select(routers: Dict[str, Router], name) -> Dict[str, Router]:
    if name is None:
        return routers
    if name not in routers:
        click.echo(f"✗ Unknown router: {name}", err=True)
        sys.exit(1)
    return {name: routers[name]}


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug):
    """Router simulator - interfaces, ARP, SPF routes and forwarding decisions."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@cli.command()
@click.argument('scenario', type=click.Path())
@click.option('--json', 'as_json', is_flag=True, help='Print decisions as JSON lines')
def run(scenario, as_json):
    """Build routers from SCENARIO and forward its packets."""
    config = _load_or_exit(scenario)
    routers = build_routers(config)

    for packet, decision in forward_packets(config, routers):
        if as_json:
            record = {"router": packet.router, "source": packet.source}
            record.update(decision.model_dump(mode='json'))
            click.echo(json.dumps(record, sort_keys=True))
        else:
            click.echo(f"[{packet.router}] {packet.source} -> {packet.destination}: {decision.describe()}")


@cli.command()
@click.argument('scenario', type=click.Path())
@click.option('--router', 'router_name', default=None, help='Only show this router')
def tables(scenario, router_name):
    """Show routing and ARP tables for SCENARIO."""
    config = _load_or_exit(scenario)
    routers = _select(build_routers(config), router_name)

    for router in routers.values():
        _echo_routing_table(router)
        _echo_arp_table(router)


@cli.command()
@click.argument('scenario', type=click.Path())
def metrics(scenario):
    """Forward SCENARIO packets and print Prometheus metrics."""
    config = _load_or_exit(scenario)
    routers = build_routers(config)
    forward_packets(config, routers)

    for router in routers.values():
        click.echo(router.metrics.to_prometheus(), nl=False)


@cli.command()
def demo():
    """Run the built-in two-router demonstration."""
    config = default_scenario()
    routers = build_routers(config)
    router1 = routers["Router1"]

    click.echo("=== ARP Resolution ===")
    mac = router1.get_link_address("192.168.2.2")
    if mac is not None:
        click.echo(f"MAC address for 192.168.2.2: {mac}")
    else:
        click.echo("MAC address for 192.168.2.2 not found.")

    click.echo("\n=== Forwarding ===")
    for packet, decision in forward_packets(config, routers):
        click.echo(f"[{packet.router}] {decision.describe()}")

    click.echo("\n=== Routing Tables ===")
    for router in routers.values():
        _echo_routing_table(router)

    click.echo("\n=== ARP Tables ===")
    for router in routers.values():
        _echo_arp_table(router)

    click.echo("\n=== OSPF ===")
    for router in routers.values():
        for statement in router.ospf_networks:
            click.echo(f"{router.name}: network {statement.network} area {statement.area}")


def main():
    """Entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
