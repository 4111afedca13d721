[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotviewer"
version = "0.1.0"
description = "Browse JSON and SQLite time series files and plot them as line or scatter charts."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["plot", "chart", "time series", "json", "sqlite", "viewer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
plotviewer = "plotviewer.mainwindow:main"

[tool.hatch.build.targets.wheel]
packages = ["plotviewer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
