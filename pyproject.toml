[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suwidgets"
version = "0.2.0"
description = "Toolkit-independent models of signal-analysis widgets: constellation, histogram, LCD, symbol view, frequency spin box"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["sdr", "signal", "widgets", "constellation", "histogram", "lcd", "symbols"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["suwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
