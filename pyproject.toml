[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antfarm"
version = "0.1.0"
description = "Parse ant-farm maps and find the fewest turns to move every ant from start to end"
requires-python = ">=3.10"
dependencies = []
keywords = ["ant farm", "graph", "paths", "puzzle", "path finding"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
antfarm = "antfarm.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["antfarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
