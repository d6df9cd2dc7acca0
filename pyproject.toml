[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "herlang"
version = "0.1.0"
description = "A compiler that turns HerLang source files into C++ source code"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "herlang", "transpiler", "c++", "language"]
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
hcp = "herlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["herlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
