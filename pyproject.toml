[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskit"
version = "0.1.0"
description = "Personal task and project tracking backed by SQLite, with theme, font and icon styling helpers"
requires-python = ">=3.10"
keywords = ["tasks", "todo", "projects", "sqlite", "productivity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["taskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
