[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluidsim"
version = "0.1.0"
description = "Interactive 2D smoothed-particle hydrodynamics water simulation"
requires-python = ">=3.10"
keywords = ["sph", "fluid", "simulation", "particles", "physics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fluidsim = "fluidsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fluidsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
