[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mmobattle"
version = "0.1.0"
description = "A small real-time battle between a player and a monster, with damage pop-ups and a HUD"
requires-python = ">=3.10"
keywords = ["game", "rpg", "battle", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mmobattle = "mmobattle.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mmobattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
