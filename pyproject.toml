[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flukit"
version = "1.0.0"
description = "Fluent-style UI building blocks: tree row model, watermark layout, global hotkey registry and the Fluent icon code points"
requires-python = ">=3.10"
dependencies = []
keywords = ["fluent", "ui", "tree-model", "hotkey", "icons", "watermark"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["flukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
