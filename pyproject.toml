[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilitarios"
version = "1.2.2"
description = "Small everyday helpers: readable quantities, screen points, timers, stopwatches, progress bars and a tiny test runner."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "progress bar", "timer", "stopwatch", "human readable", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["utilitarios"]

[tool.hatch.build.targets.sdist]
include = ["utilitarios", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
