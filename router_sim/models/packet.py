"""Packet model."""

from pydantic import BaseModel, ConfigDict, Field


class Packet(BaseModel):
    """Immutable packet handed to the forwarding engine."""
    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Source network address")
    destination: str = Field(..., description="Destination network address")
    payload: str = Field(default="", description="Opaque payload")
