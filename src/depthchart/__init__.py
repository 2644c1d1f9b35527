"""Per-sport depth chart engine driven by message payloads."""

__version__ = "0.1.0"
