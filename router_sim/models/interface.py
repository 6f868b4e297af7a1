"""Router interface model."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AdminState(str, Enum):
    """Administrative state of an interface."""
    DOWN = "down"
    UP = "up"


class Interface(BaseModel):
    """
    Named, addressable attachment point on a router.

    The link address is fixed at creation. Network address and mask stay
    unset, and the interface stays down, until ``configure`` is called.
    """
    name: str = Field(..., description="Interface name (e.g., GigabitEthernet0/0)")
    link_address: str = Field(..., frozen=True, description="Hardware (MAC) address")
    network_address: Optional[str] = Field(None, description="Network (IP) address")
    mask: Optional[str] = Field(None, description="Subnet mask")
    state: AdminState = Field(default=AdminState.DOWN, description="Administrative state")

    def configure(self, network_address: str, mask: str):
        """
        Assign the network address and mask and bring the interface up.

        Repeated calls overwrite the previous assignment.

        Args:
            network_address: Network address to assign
            mask: Subnet mask to assign
        """
        self.network_address = network_address
        self.mask = mask
        self.state = AdminState.UP

    @property
    def is_up(self) -> bool:
        return self.state == AdminState.UP
