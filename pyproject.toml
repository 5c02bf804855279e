[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drlsim"
version = "0.1.0"
description = "Simulator for a two-sided daytime running light controller with addressable LED rows, loops and turn-signal sweeps"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "drl", "headlight", "sk6812", "simulation", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drlsim = "drlsim.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["drlsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
