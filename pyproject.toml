[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glasscockpit"
version = "0.1.0"
description = "Configuration, flight data sources and prerendered fonts for glass cockpit displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["avionics", "glass cockpit", "flight instruments", "flightgear", "uav", "fonts"]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glasscockpit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
