[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixmapkit"
version = "1.0.0"
description = "Read, write, invert and convert plain-text Netpbm images (PBM, PGM, PPM)"
requires-python = ">=3.10"
dependencies = []
keywords = ["netpbm", "pbm", "pgm", "ppm", "image", "bitmap", "greymap", "pixmap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pixmapkit = "pixmapkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixmapkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
