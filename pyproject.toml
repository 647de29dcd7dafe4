[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skywave"
version = "0.1.0"
description = "HF sky-wave propagation calculations: MUF statistics, absorption, field strength and antenna patterns"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["hf", "propagation", "ionosphere", "skywave", "muf", "radio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["skywave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
