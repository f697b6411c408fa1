[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fishgl"
version = "0.1.0"
description = "A small software rasteriser with vector/matrix math, bounding-volume helpers and a single-client telnet console"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "software-rendering", "3d", "graphics", "linear-algebra", "rgb565", "telnet", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Terminals :: Telnet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fishgl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
