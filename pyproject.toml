[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiling_model"
version = "0.2.8"
description = "Layout tree model for a tiling window manager: node trees, selection, window mapping, sizing and spring animation"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiling", "window-manager", "layout", "tree", "animation"]
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
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tiling_model"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
