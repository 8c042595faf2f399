[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopatterns"
version = "0.1.0"
description = "Small concurrency and data-structure patterns: a hold-and-release work latch, a chunked byte buffer and sorted-sequence helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["latch", "buffer", "queue", "threading", "dedup"]
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
packages = ["gopatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
