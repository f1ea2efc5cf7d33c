[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "servercore"
version = "22.1.1"
description = "Shared server utilities: timers, intrusive lists, byte dumps, progress bars and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["timer", "linked-list", "utf8", "hexdump", "progress-bar", "server"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["servercore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
