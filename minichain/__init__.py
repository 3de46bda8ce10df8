"""A minimal proof-of-work blockchain, in memory or stored in SQLite."""

__version__ = "0.1.0"