[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgpool"
version = "0.1.0"
description = "Prewitt edge detection and 2x2 max/min pooling for RGBA images"
requires-python = ">=3.10"
keywords = ["image processing", "convolution", "pooling", "edge detection", "prewitt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imgpool = "imgpool.cli:main"
imgpool-vector-add = "imgpool.vector_add:main"

[tool.hatch.build.targets.wheel]
packages = ["imgpool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
