[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circumdraw"
version = "0.1.0"
description = "Place three markers on a grayscale canvas and draw the ring through them"
requires-python = ">=3.10"
dependencies = []
keywords = ["circumcircle", "raster", "grayscale", "geometry", "drawing", "pgm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circumdraw = "circumdraw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["circumdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
