[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antcolony"
version = "0.1.0"
description = "Ant colony foraging simulation with pheromone trails, rendered with pygame"
requires-python = ">=3.10"
keywords = ["ants", "simulation", "pheromone", "swarm", "artificial life", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
antcolony = "antcolony.app:main"

[tool.hatch.build.targets.wheel]
packages = ["antcolony"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
