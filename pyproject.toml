[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geomkit"
version = "0.1.0"
description = "Planar computational geometry: points, edges, polygons, convex hulls, monotone polygon triangulation and a small JSON HTTP service"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "computational-geometry", "convex-hull", "graham-scan", "triangulation", "polygon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
geomkit-server = "geomkit.server:main"

[tool.hatch.build.targets.wheel]
packages = ["geomkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
