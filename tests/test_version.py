from mcptoolkit import version
from mcptoolkit.version import user_agent


def test_user_agent_default():
    assert user_agent() == "docker/mcp_gateway/v/HEAD"


def test_user_agent_ends_with_version():
    assert user_agent().endswith("/v/" + version.VERSION)


def test_user_agent_prefix():
    assert user_agent().startswith("docker/mcp_gateway/")