"""docnav - interactive query layer of a generated API-documentation browser."""

__version__ = "0.1.0"
