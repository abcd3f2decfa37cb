"""accessgate - tiered access-control decisions for discoverable documents."""

__version__ = "0.1.0"
