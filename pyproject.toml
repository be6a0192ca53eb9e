[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rrdns"
version = "0.1.0"
description = "Building blocks for a small DNS server: name canonicalisation, resource record data codecs, configuration, clocks and logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "rdata", "resource-records", "wire-format", "configuration"]
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
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rrdns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
