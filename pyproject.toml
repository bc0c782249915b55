[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helixml"
version = "0.1.0"
description = "Tensor metadata primitives and a topological memory system of motifs, cycles and stable cores"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["machine-learning", "tensor", "topological-memory", "motifs", "cycles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["helixml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
