"""Right-hand rule maze solver with an HTTP API."""

__version__ = "1.0.0"
