[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe"
version = "0.1.0"
description = "Isometric wireframe viewer for height-map files"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["wireframe", "isometric", "height map", "fdf", "viewer", "bresenham"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
wireframe = "wireframe.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireframe"]

[tool.pytest.ini_options]
addopts = "-ra"
