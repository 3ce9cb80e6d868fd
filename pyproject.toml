[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "towerdef"
version = "0.1.0"
description = "Headless game logic for a path-based tower defense game: enemies, towers, bullets, waves and map sessions."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defense", "simulation", "strategy"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["towerdef*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
