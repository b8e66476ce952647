[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liveoverlay"
version = "0.1.0"
description = "Live game-state model for a broadcast overlay: event parsing, snapshot deltas and glyph bounding boxes in screen captures"
requires-python = ">=3.10"
dependencies = []
keywords = ["overlay", "broadcast", "esports", "live-client", "ocr", "bmp"]
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
    "Typing :: Typed",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liveoverlay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
