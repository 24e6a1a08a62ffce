[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skirmish"
version = "0.1.0"
description = "Unit sessions, move commands and rectangular formations for deterministic real-time strategy simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["rts", "formation", "simulation", "deterministic", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skirmish"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
