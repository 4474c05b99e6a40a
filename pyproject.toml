[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "passerine"
version = "0.1.0"
description = "Core data structures, bytecode tools, a managed slot heap and the aspen package tool for the Passerine language"
requires-python = ">=3.11"
dependencies = [
    "sortedcontainers",
    "tomli-w",
]
keywords = ["passerine", "interpreter", "bytecode", "heap", "package-manager"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aspen = "passerine.aspen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["passerine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
