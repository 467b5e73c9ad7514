[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitdecimal"
version = "0.1.0"
description = "A 96-bit scaled decimal number with special values, division and banker's rounding"
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "fixed-point", "arithmetic", "division", "bankers-rounding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitdecimal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
