"""Forwarding decision values."""

from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class DecisionKind(str, Enum):
    """Outcome of evaluating a packet against the router tables."""
    FORWARD = "forward"
    NO_ROUTE = "no_route"
    UNRESOLVED_NEXT_HOP = "unresolved_next_hop"


class Forward(BaseModel):
    """Route and link address found; the packet can be handed off."""
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecisionKind.FORWARD] = DecisionKind.FORWARD
    destination: str = Field(..., description="Packet destination")
    next_hop: str = Field(..., description="Next hop from the forwarding table")
    link_address: str = Field(..., description="Resolved link address of the next hop")

    def describe(self) -> str:
        return (
            f"Forwarding packet to {self.destination} via next hop "
            f"{self.next_hop} with MAC {self.link_address}"
        )


class NoRoute(BaseModel):
    """No forwarding table entry for the destination."""
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecisionKind.NO_ROUTE] = DecisionKind.NO_ROUTE
    destination: str = Field(..., description="Packet destination")

    def describe(self) -> str:
        return f"No route to {self.destination}"


class UnresolvedNextHop(BaseModel):
    """A route exists but the next hop has no ARP entry."""
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecisionKind.UNRESOLVED_NEXT_HOP] = DecisionKind.UNRESOLVED_NEXT_HOP
    next_hop: str = Field(..., description="Next hop without a link address")

    def describe(self) -> str:
        return f"MAC address for next hop {self.next_hop} not found."


Decision = Union[Forward, NoRoute, UnresolvedNextHop]
