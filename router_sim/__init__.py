"""Router control and forwarding plane model."""

__version__ = "0.1.0"
