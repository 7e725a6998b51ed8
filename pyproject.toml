[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tracekit"
version = "1.0.0"
description = "Building blocks for a ray tracer and keyframe modeler: matrices, rays, materials, bounding boxes, BSP trees and an orbit camera"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "graphics", "bsp tree", "matrix", "camera", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tracekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
