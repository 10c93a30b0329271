[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "schemelet"
version = "0.1.0"
description = "A small interpreter for a subset of Scheme: tokenizer, parser and evaluator"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheme", "lisp", "interpreter", "tokenizer", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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

[project.scripts]
schemelet = "schemelet.interpreter:main"

[tool.setuptools.packages.find]
include = ["schemelet*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
