[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memorycards"
version = "0.1.0"
description = "A card-matching memory game: flip two cards, keep the pairs, count the clicks."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "memory", "concentration", "cards", "pygame", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
memorycards = "memorycards.app:main"

[tool.hatch.build.targets.wheel]
packages = ["memorycards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
