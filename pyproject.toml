[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safecalc"
version = "0.1.0"
description = "A safe arithmetic expression calculator with overflow, domain and parenthesis checking"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "expression", "arithmetic", "shunting-yard", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
safecalc = "safecalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["safecalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
