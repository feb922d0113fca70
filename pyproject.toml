[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toyrobot"
version = "1.0.0"
description = "A toy robot simulator that moves a robot around a 5x5 table top from text commands"
requires-python = ">=3.10"
keywords = ["robot", "simulator", "table-top", "cli", "game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toyrobot = "toyrobot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["toyrobot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
