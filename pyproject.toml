[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkken"
version = "0.1.0"
description = "Data tables, input buffering and combo recognition for a two-player fighting game"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fighting-game",
    "combo",
    "input-buffer",
    "frame-data",
    "csv",
    "state-machine",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chunkken = "chunkken.game_data:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkken"]

[tool.hatch.build.targets.sdist]
include = ["chunkken", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
