[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osmsieve"
version = "0.1.0"
description = "Building blocks for filtering OpenStreetMap data: bounding-box index, disk-backed id set, turn restrictions, XML writing and tag value conversions."
requires-python = ">=3.10"
dependencies = []
keywords = ["openstreetmap", "osm", "gis", "transit", "bounding-box", "bloom-filter", "turn-restrictions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["osmsieve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
