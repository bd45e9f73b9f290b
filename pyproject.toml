[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "submarine"
version = "0.1.0"
description = "Solvers for submarine-themed puzzles: beacon scanners, image enhancement, dice games, reactor cuboids, amphipod burrows, an ALU and sea cucumbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "simulation", "search", "solver", "dijkstra"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
submarine-scanners = "submarine.scanners:main"
submarine-trench = "submarine.trench:main"
submarine-cucumbers = "submarine.cucumbers:main"
submarine-dirac = "submarine.dirac:main"
submarine-reactor = "submarine.reactor:main"
submarine-alu = "submarine.alu:main"
submarine-amphipods = "submarine.amphipods:main"

[tool.hatch.build.targets.wheel]
packages = ["submarine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
