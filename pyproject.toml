[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "freightsched"
version = "1.0.0"
description = "Match cargo to freight by location and time, with an interactive menu for managing both lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["freight", "cargo", "scheduling", "logistics", "transport"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
freightsched = "freightsched.cli:main"

[tool.setuptools.packages.find]
include = ["freightsched*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
