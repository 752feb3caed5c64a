[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dfengine"
version = "0.1.0"
description = "A small text-mode 2-D game engine: objects, events, collisions, sprites and a fixed-rate game loop."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "ascii", "text-mode", "sprites", "collision", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dfengine"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
