[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hislang"
version = "0.1.0"
description = "Compiler for the His language that emits C++ source code"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "language", "transpiler", "c++", "code generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
his = "hislang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hislang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
