[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipmiwire"
version = "0.1.0"
description = "Encoding and decoding of IPMI v1.5 and v2.0 messages, commands and sensor records"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipmi", "bmc", "sdr", "sensors", "chassis", "out-of-band"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ipmiwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
