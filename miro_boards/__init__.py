"""Miro boards bridge - typed tool access to the Miro REST API.

This package wraps the Miro v2 REST surface (boards, items and their
variants) in a small async client, and provides the payload shaping,
bulk helpers and resource catalog used by the MCP frontend.
"""

__version__ = "0.2.0"
__all__ = ["__version__"]
