"""Interest-based one-on-one chat matchmaking server."""

__version__ = "0.1.0"
