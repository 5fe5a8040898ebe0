[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qcircuit"
version = "0.1.0"
description = "A small embedded language for building quantum circuits from composable gate expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "circuit", "qasm", "gates", "simulator"]
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
    "Topic :: Scientific/Engineering :: Quantum Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qcircuit-demo = "qcircuit.main:main"

[tool.hatch.build.targets.wheel]
packages = ["qcircuit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
