[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nightshift"
version = "1.3.1"
description = "Game logic for a night-watch survival game: office doors and lights, camera views, power drain, the clock until 6 AM and the screens between nights."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "survival", "horror", "state-machine", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nightshift"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
