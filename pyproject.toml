[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spiritedit"
version = "0.16.0"
description = "Editor tool state, brush tool mapping and virtual entity links for a level editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "level-editor", "terrain", "brush", "tiles", "foliage", "game-development"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spiritedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
