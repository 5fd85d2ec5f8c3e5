[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "histsearch"
version = "0.1.0"
description = "Shell history helpers: list formatting, command statistics, filtering, key bindings and an interactive search model"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "history", "search", "zsh", "bash", "fish", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
histsearch = "histsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["histsearch"]

[tool.hatch.build.targets.sdist]
include = ["histsearch", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
packages = ["histsearch"]
