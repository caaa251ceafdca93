[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycub"
version = "0.1.0"
description = "Parsing and validation of .cub raycaster scene files, with small text and list utilities"
requires-python = ">=3.10"
keywords = ["raycasting", "raycaster", "cub", "scene", "map", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["raycub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
