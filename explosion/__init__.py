"""Interactive particle explosion effect built on pygame."""

__version__ = "0.1.0"
