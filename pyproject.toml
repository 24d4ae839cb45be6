[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaraplot"
version = "0.2.0"
description = "Trajectory planning and inverse kinematics for a two-link SCARA plotter"
requires-python = ">=3.10"
dependencies = []
keywords = ["scara", "robotics", "kinematics", "trajectory", "bezier", "plotter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
scaraplot = "scaraplot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scaraplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
