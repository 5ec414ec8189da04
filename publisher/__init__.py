"""Halo blog publisher: MCP tools for publishing posts with inferred taxonomy."""

__version__ = "1.0.0"
