[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciipaint"
version = "0.1.0"
description = "A small terminal paint program that draws straight lines on a character canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "paint", "canvas", "terminal", "drawing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asciipaint = "asciipaint.app:main"

[tool.hatch.build.targets.wheel]
packages = ["asciipaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
