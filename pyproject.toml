[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastdate"
version = "0.3.34"
description = "Date, time and datetime values with RFC 3339 parsing, pattern formatting and fixed UTC offsets"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "time", "datetime", "rfc3339", "timestamp", "utc-offset"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fastdate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
