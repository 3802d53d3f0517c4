[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustupcli"
version = "0.1.0"
description = "Command-line logic for a toolchain manager: argument parsing, self-update checks, shell PATH setup, completions and documentation pages"
requires-python = ">=3.11"
dependencies = []
keywords = ["toolchain", "installer", "self-update", "completions", "cli", "path"]
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
    "Topic :: System :: Installation/Setup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rustupcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
