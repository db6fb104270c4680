[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocmon"
version = "0.1.0"
description = "A small terminal monster-collecting game with a Perlin-noise world map"
requires-python = ">=3.10"
keywords = ["game", "terminal", "perlin", "role-playing", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocmon = "pocmon.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pocmon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
