[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sincap"
version = "0.1.0"
description = "Helpers for web services: list-query parsing, type and time helpers, validators, request and server utilities"
requires-python = ">=3.10"
dependencies = [
    "xmltodict",
]
keywords = ["query", "filter", "sort", "validation", "web", "utilities"]
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sincap"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
