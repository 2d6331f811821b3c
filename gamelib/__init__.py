"""Building blocks for terminal games."""

__version__ = "0.1.0"