[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "solarsystem2d"
version = "0.1.0"
description = "2D transform hierarchy, camera, timer and input model for a small animated solar system scene"
requires-python = ">=3.10"
dependencies = []
keywords = ["2d", "transform", "matrix", "camera", "scene graph", "solar system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["solarsystem2d*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
