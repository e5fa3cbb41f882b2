[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interspace"
version = "0.1.0"
description = "Catalogue of UI-stack components and the paths that connect them"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "graphics", "rendering", "catalog", "dependency-tree"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
interspace-regen = "interspace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["interspace"]

[tool.pytest.ini_options]
addopts = "-ra"
