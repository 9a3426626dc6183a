[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compress-json"
version = "0.1.0"
description = "Store JSON data in a space-efficient compressed form, with round-trip compression and decompression."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "compress", "decompress", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["compress_json"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
