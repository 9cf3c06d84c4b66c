[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "futzc"
version = "0.1.0"
description = "Front end of the Futz language compiler: a regex-driven scanner and command-line driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "scanner", "tokenizer", "futz"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
futz = "futzc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["futzc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
