[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprog"
version = "1.0.0"
description = "Systems-programming building blocks: a dynamic array, word counting, high-precision hexadecimal integers and Fibonacci numbers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic array",
    "bigint",
    "hexadecimal",
    "fibonacci",
    "word count",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
tests = ["pytest"]

[project.scripts]
sysprog-wc = "sysprog.wc:main"
sysprog-addhex = "sysprog.addhex:main"
sysprog-fib = "sysprog.fib:main"

[tool.hatch.build.targets.wheel]
packages = ["sysprog"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
