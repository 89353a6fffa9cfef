[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nurogami"
version = "0.1.0"
description = "Interactive prompt and lexer for the .gami toy language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "tokenizer", "repl", "toy-language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
nurogami = "nurogami.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["nurogami"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
