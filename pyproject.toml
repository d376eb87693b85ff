[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aimlab"
version = "0.1.0"
description = "A small first-person aim trainer: shoot cubes on a wall during a timed round."
requires-python = ">=3.10"
keywords = ["game", "aim trainer", "fps", "pygame", "raycast"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aimlab = "aimlab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["aimlab"]

[tool.pytest.ini_options]
addopts = "-ra"
