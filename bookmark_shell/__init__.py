"""Desktop bookmark shell with a thread-safe in-memory bookmark store."""

__version__ = "0.1.0"
