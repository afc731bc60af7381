[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitmuldiv"
version = "1.0.0"
description = "Express multiplication and division by an integer constant as bit shifts with additions or subtractions"
requires-python = ">=3.10"
dependencies = []
keywords = ["bit shift", "multiplication", "division", "reciprocal", "constant"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitmuldiv = "bitmuldiv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bitmuldiv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
