[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apecore"
version = "0.1.0"
description = "Runtime building blocks for a small bytecode scripting language: hash maps, arrays, string building, error lists, compilation scopes and bytecode frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "bytecode", "virtual machine", "hash map", "collections"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["apecore"]

[tool.pytest.ini_options]
addopts = "-ra"
