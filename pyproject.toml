[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carlkit"
version = "0.1.0"
description = "IEEE 802.11 channel conversions and constants, plus Kconfig-style expression and config-file utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["ieee80211", "802.11", "wifi", "channels", "kconfig", "tristate", "expressions"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["carlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
