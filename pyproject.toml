[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crowlang"
version = "0.1.0"
description = "Lexer, syntax tree, runtime values and tree-walking evaluator for the small Crow programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "lexer", "evaluator", "language", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crowlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
