[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netscope"
version = "0.1.0"
description = "Small network toolkit: ICMP ping, TCP port scan, WHOIS lookup, public IP lookup and a tiny HTTP server"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "ping", "icmp", "port-scanner", "whois", "public-ip", "http-server"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netscope = "netscope.server:main"
netscope-ping = "netscope.ping:main"
netscope-scan = "netscope.port_scanner:main"
netscope-whois = "netscope.whois:main"
netscope-ipinfo = "netscope.ip_info:main"

[tool.hatch.build.targets.wheel]
packages = ["netscope"]

[tool.hatch.build.targets.sdist]
include = ["netscope", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
