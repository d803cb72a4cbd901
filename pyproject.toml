[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockman"
version = "0.1.0"
description = "Building blocks for a container deployment dashboard: an HTML element tree with UI components, validators, URL builders, small utilities and an HTTP load tester."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "deployment",
    "docker",
    "dashboard",
    "html",
    "load-testing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dockman-load = "dockman.loadtest:main"

[tool.hatch.build.targets.wheel]
packages = ["dockman"]

[tool.hatch.build.targets.sdist]
include = [
    "dockman",
    "tests",
]

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
