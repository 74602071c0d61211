"""Client-side state and wire protocol for a small friends-and-messages chat service."""

__version__ = "0.1.0"