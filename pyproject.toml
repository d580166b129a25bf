[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nomina"
version = "0.1.0"
description = "Interactive employee payroll records kept in a linked list, with CSV and binary storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "employees", "linked list", "csv", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nomina = "nomina.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nomina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
