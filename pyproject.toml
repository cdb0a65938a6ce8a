[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structbuilder"
version = "0.1.0"
description = "Generate fluent, validating builder objects for dataclasses."
requires-python = ">=3.10"
dependencies = []
keywords = ["builder", "builder-pattern", "dataclass", "code-generation", "fluent-interface"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["structbuilder"]

[tool.hatch.build.targets.sdist]
include = ["structbuilder", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
