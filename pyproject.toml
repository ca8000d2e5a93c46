[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compgeom"
version = "0.1.0"
description = "Computational geometry algorithms: polygon triangulation, convex hulls, Voronoi diagrams and quad trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "computational geometry",
    "triangulation",
    "monotone partition",
    "ear clipping",
    "convex hull",
    "voronoi",
    "fortune",
    "quadtree",
    "dcel",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["compgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
