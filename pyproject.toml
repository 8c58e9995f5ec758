[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegrid"
version = "0.1.0"
description = "Grid-based snake game engine with food, traps, saved settings and a line-driven terminal session"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "grid", "arcade", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakegrid = "snakegrid.session:main"

[tool.hatch.build.targets.wheel]
packages = ["snakegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
