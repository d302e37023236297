[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swbattle"
version = "0.1.0"
description = "Turn-based battle simulator on a grid map driven by scenario command files"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "battle", "grid", "turn-based", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swbattle = "swbattle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["swbattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
