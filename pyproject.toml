[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotscript"
version = "0.1.0"
description = "Build gnuplot scripts for curves, error bars, candlesticks and filled curves from Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnuplot", "plot", "chart", "svg", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plotscript"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
