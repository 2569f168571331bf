[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslab"
version = "0.1.0"
description = "Systems programming exercises: a debugging allocator, a terminal snake game, linked lists, schedulers and text utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "allocator",
    "snake",
    "curses",
    "linked-list",
    "scheduling",
    "threads",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syslab-snake = "syslab.snake:main"
syslab-schedule = "syslab.scheduler:main"
syslab-threadlogs = "syslab.threadlogs:main"

[tool.hatch.build.targets.wheel]
packages = ["syslab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
