[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastergeom"
version = "0.1.0"
description = "Raster graphics algorithms: circles, seed fills, polygon clipping, 2D transforms, curves and a bouncing-square animation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterization",
    "bresenham",
    "flood-fill",
    "boundary-fill",
    "polygon-clipping",
    "bezier",
    "koch",
    "transformations",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rastergeom = "rastergeom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rastergeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
