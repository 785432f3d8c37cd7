[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lz77kit"
version = "0.1.0"
description = "LZ77 sliding-window compression with timed command-line tools that log results to CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["lz77", "compression", "sliding-window", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lz77-compress = "lz77kit.cli:compress_main"
lz77-decompress = "lz77kit.cli:decompress_main"

[tool.hatch.build.targets.wheel]
packages = ["lz77kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
