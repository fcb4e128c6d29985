[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stormbuf"
version = "0.1.0"
description = "Byte FIFO buffers with seekable reads, plus a thread-safe blocking buffer and a read-only consumer view"
requires-python = ">=3.10"
dependencies = []
keywords = ["buffer", "fifo", "bytes", "consumer", "threading", "blocking"]
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
packages = ["stormbuf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
