[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schema_derive"
version = "0.0.2"
description = "Generate JSON Schema documents from Python type annotations, dataclasses, named tuples and enums"
requires-python = ">=3.10"
dependencies = []
keywords = ["json-schema", "dataclasses", "enum", "schema", "annotations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats :: JSON :: JSON Schema",
]

[project.optional-dependencies]
test = ["pytest", "jsonschema"]

[tool.hatch.build.targets.wheel]
packages = ["schema_derive"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
