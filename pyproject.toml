[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffzip"
version = "0.1.0"
description = "Huffman coding compressor and decompressor for files and byte strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "archiving", "entropy-coding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
huffzip = "huffzip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffzip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
