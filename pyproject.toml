[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skychart"
version = "0.1.0"
description = "Interactive star map of a Hipparcos-style catalogue with stereographic projection"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["astronomy", "star map", "hipparcos", "stereographic projection", "planetarium"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
skychart = "skychart.app:main"

[tool.hatch.build.targets.wheel]
packages = ["skychart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
