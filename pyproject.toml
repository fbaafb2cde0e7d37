[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katana"
version = "0.1.0"
description = "Building blocks for 2D games on pygame: sprite batching, animations, fonts, input, colours and resources."
requires-python = ">=3.10"
keywords = ["game", "2d", "pygame", "sprites", "animation", "input", "sprite-batch"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["katana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
