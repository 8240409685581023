"""Version information for the gateway tooling."""

VERSION = "HEAD"


def user_agent() -> str:
    """Return the User-Agent string advertised by the gateway."""
    return "docker/mcp_gateway/v/" + VERSION