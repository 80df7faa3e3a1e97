[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "judgekit"
version = "0.1.0"
description = "Solutions to classic online-judge exercises as a small Python library and command"
requires-python = ">=3.10"
dependencies = []
keywords = ["online judge", "programming exercises", "algorithms", "competitive programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgekit = "judgekit.cli:main"

[tool.setuptools.packages.find]
include = ["judgekit*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
