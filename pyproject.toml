[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uscript"
version = "0.1.0"
description = "A small line-oriented scripting engine that drives commands exposed by plugins"
requires-python = ">=3.10"
dependencies = []
keywords = ["script", "interpreter", "plugins", "macros", "automation"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uscript"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
