"""Scenario configuration models."""

import ipaddress
import re
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


_LINK_ADDRESS_RE = re.compile(r"^[0-9A-Fa-f]{2}(:[0-9A-Fa-f]{2}){5}$")


class InterfaceConfig(BaseModel):
    """Interface definition."""
    name: str = Field(..., min_length=1, description="Interface name")
    link_address: str = Field(..., description="MAC address (aa:bb:cc:dd:ee:ff)")
    network_address: Optional[str] = Field(None, description="IP address")
    mask: Optional[str] = Field(None, description="Dotted IPv4 netmask or prefix length")

    @field_validator("link_address")
    @classmethod
    def _check_link_address(cls, v: str) -> str:
        if not _LINK_ADDRESS_RE.match(v):
            raise ValueError(f"invalid link address: {v}")
        return v

    @field_validator("network_address")
    @classmethod
    def _check_network_address(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            ipaddress.ip_address(v)
        return v

    @model_validator(mode="after")
    def _check_address_and_mask(self) -> "InterfaceConfig":
        if (self.network_address is None) != (self.mask is None):
            raise ValueError(f"interface {self.name}: network_address and mask go together")
        if self.mask is None:
            return self

        # Mask is checked in the address family of network_address
        try:
            ipaddress.ip_interface(f"{self.network_address}/{self.mask}")
        except ValueError:
            raise ValueError(f"interface {self.name}: invalid mask {self.mask}")

        # ip_interface also takes host masks; only netmasks are allowed
        if "." in self.mask and str(ipaddress.IPv4Network(f"0.0.0.0/{self.mask}").netmask) != self.mask:
            raise ValueError(f"interface {self.name}: {self.mask} is not a netmask")
        return self


class StaticRouteConfig(BaseModel):
    """Static forwarding table entry."""
    destination: str = Field(..., description="Destination address or CIDR network")
    next_hop: str = Field(..., min_length=1, description="Next hop address")

    @field_validator("destination")
    @classmethod
    def _check_destination(cls, v: str) -> str:
        ipaddress.ip_network(v, strict=False)
        return v


class ArpEntryConfig(BaseModel):
    """
    Static ARP entry.

    Keys are IP addresses or router identities, since computed routes
    name their next hop by router identity.
    """
    network_address: str = Field(..., min_length=1, description="IP address or router identity")
    link_address: str = Field(..., description="MAC address")

    @field_validator("link_address")
    @classmethod
    def _check_link_address(cls, v: str) -> str:
        if not _LINK_ADDRESS_RE.match(v):
            raise ValueError(f"invalid link address: {v}")
        return v


class OspfConfig(BaseModel):
    """OSPF network statement."""
    area: str = Field(default="0", description="OSPF area")
    network: str = Field(..., description="Network advertised in the area")


class RouterConfig(BaseModel):
    """Configuration of one router."""
    name: str = Field(..., min_length=1, description="Router identity")
    interfaces: List[InterfaceConfig] = Field(default_factory=list, description="Interfaces")
    neighbors: Dict[str, int] = Field(default_factory=dict, description="Neighbor -> link cost")
    routes: List[StaticRouteConfig] = Field(default_factory=list, description="Static routes")
    arp: List[ArpEntryConfig] = Field(default_factory=list, description="Static ARP entries")
    ospf: Optional[OspfConfig] = Field(None, description="OSPF statement (runs route computation)")

    @field_validator("neighbors")
    @classmethod
    def _check_costs(cls, v: Dict[str, int]) -> Dict[str, int]:
        for name, cost in v.items():
            if cost < 0:
                raise ValueError(f"negative cost {cost} for neighbor {name}")
        return v

    @model_validator(mode="after")
    def _unique_interfaces(self) -> "RouterConfig":
        names = [i.name for i in self.interfaces]
        if len(names) != len(set(names)):
            raise ValueError(f"router {self.name}: duplicate interface names")
        return self


class PacketConfig(BaseModel):
    """Packet injected at a router."""
    router: str = Field(..., description="Ingress router name")
    source: str = Field(..., description="Source address")
    destination: str = Field(..., description="Destination address")
    payload: str = Field(default="", description="Payload")


class ScenarioConfig(BaseModel):
    """
    A complete simulation scenario.

    Routers are configured in order; packets are evaluated after all
    routers are built.
    """
    name: str = Field(default="scenario", description="Scenario name")
    routers: List[RouterConfig] = Field(default_factory=list, description="Routers")
    packets: List[PacketConfig] = Field(default_factory=list, description="Packets to forward")

    @model_validator(mode="after")
    def _check_references(self) -> "ScenarioConfig":
        names = [r.name for r in self.routers]
        if len(names) != len(set(names)):
            raise ValueError("duplicate router names")
        for packet in self.packets:
            if packet.router not in names:
                raise ValueError(f"packet references unknown router {packet.router}")
        return self
