[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "implicitplot"
version = "0.1.0"
description = "Trace implicit polynomial curves P(x, y) = 0 with Newton sampling, a quadtree and curvature estimates"
requires-python = ">=3.10"
dependencies = []
keywords = ["implicit curve", "polynomial", "newton", "quadtree", "curvature", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["implicitplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
