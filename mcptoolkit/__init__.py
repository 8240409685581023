"""Helpers for MCP gateway tool calls, listings and enablement, plus a TCP bridge, an allow-list HTTP proxy and a tool-call interceptor."""

__version__ = "0.1.0"

__all__ = ["__version__"]