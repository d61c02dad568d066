[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ochain"
version = "0.1.0"
description = "Versioned key-value storage and CBOR record tables for the OChain game network state"
requires-python = ">=3.11"
dependencies = [
    "cbor2",
]
keywords = [
    "database",
    "key-value",
    "mvcc",
    "versioned",
    "cbor",
    "game-state",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ochain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
