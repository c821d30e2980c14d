[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fildefer"
version = "0.1.0"
description = "Isometric wireframe rendering of .fdf height maps into in-memory images, with an XPM reader and a small window-and-hook event model"
requires-python = ">=3.10"
dependencies = []
keywords = ["fdf", "wireframe", "isometric", "heightmap", "xpm", "bresenham"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fildefer = "fildefer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fildefer"]

[tool.pytest.ini_options]
addopts = "-ra"
