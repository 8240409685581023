[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcptoolkit"
version = "0.1.0"
description = "Helpers and small servers for MCP gateway tools: tool-call arguments and results, tool listings, per-server tool enablement, a TCP bridge, an allow-list HTTP proxy and a tool-call interceptor."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["mcp", "gateway", "tools", "proxy", "bridge", "interceptor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Internet :: Proxy Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
mcptoolkit-jcat = "mcptoolkit.jcat:main"
mcptoolkit-bridge = "mcptoolkit.bridge:main"
mcptoolkit-l7proxy = "mcptoolkit.l7proxy:main"
mcptoolkit-interceptor = "mcptoolkit.interceptor:main"

[tool.hatch.build.targets.wheel]
packages = ["mcptoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
