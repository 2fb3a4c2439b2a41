[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractonica"
version = "0.0.3"
description = "Lunar ephemeris clocks: map new moon, apogee and nodal cycles onto base-8 glyphs and heptagon dials"
requires-python = ">=3.10"
dependencies = []
keywords = ["moon", "ephemeris", "lunar", "clock", "led-matrix", "glyph", "octal"]
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
    "Topic :: Scientific/Engineering :: Astronomy",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fractonica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
