#!/usr/bin/env python3
"""
Walk through the three forwarding outcomes on a single router.

This script demonstrates:
1. Interface configuration
2. Route computation over neighbor costs
3. NoRoute, UnresolvedNextHop and Forward decisions
"""

from router_sim.models import Interface, Packet
from router_sim.routing import Router


def main():
    print("=== Forwarding Walkthrough ===\n")

    router = Router("Router1")

    print("Step 1: Configuring interfaces...")
    for name, mac, ip in [
        ("GigabitEthernet0/0", "00:1A:2B:3C:4D:5E", "192.168.1.1"),
        ("GigabitEthernet0/1", "00:1A:2B:3C:4D:5F", "192.168.2.1"),
    ]:
        iface = Interface(name=name, link_address=mac)
        iface.configure(ip, "255.255.255.0")
        router.add_interface(iface)
        print(f"  ✓ {name} {ip} ({iface.state.value})")

    print("\nStep 2: Computing routes...")
    router.add_neighbor("Router2", 1)
    router.add_neighbor("Router3", 5)
    router.compute_routes()
    for destination, next_hop in router.show_routing_table():
        print(f"  Route: {destination} via {next_hop}")

    packet = Packet(source="192.168.1.2", destination="192.168.3.0/24", payload="hello")

    print("\nStep 3: Forwarding without a route...")
    print(f"  {router.forward_packet(packet).describe()}")

    print("\nStep 4: Forwarding with a route but no ARP entry...")
    router.add_route("192.168.3.0/24", "192.168.2.2")
    print(f"  {router.forward_packet(packet).describe()}")

    print("\nStep 5: Forwarding with a resolved next hop...")
    router.add_arp_entry("192.168.2.2", "00:1A:2B:3C:4D:6A")
    print(f"  {router.forward_packet(packet).describe()}")

    print("\n=== Metrics ===")
    print(router.metrics.to_prometheus())


if __name__ == "__main__":
    main()
