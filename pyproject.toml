[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firefly2d"
version = "0.1.0"
description = "Core pieces of a small 2D game engine: rigid-body physics, thread-safe variables, GUI widgets, input state and lights"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "2d", "physics", "rigidbody", "gui", "collision"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["firefly2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
