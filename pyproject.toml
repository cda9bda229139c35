[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drawcore"
version = "0.1.0"
description = "Geometry, animation, viewing and command handling for a small 3D drawing editor"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "cad",
    "geometry",
    "3d",
    "drawing",
    "camera",
    "interpolation",
    "slerp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["drawcore"]

[tool.hatch.build.targets.sdist]
include = [
    "drawcore",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
