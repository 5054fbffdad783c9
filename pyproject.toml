[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "racecar"
version = "0.1.0"
description = "Rendering-free core of a race car learning simulation: checkpoints, lap timing, button panel state, generation bookkeeping and car monitoring"
requires-python = ">=3.10"
dependencies = []
keywords = ["racing", "simulation", "checkpoints", "lap timer", "neuroevolution"]
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
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["racecar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
