[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsapractice"
version = "0.1.0"
description = "Classic data-structure and algorithm practice problems: strings, searching, sequences, scheduling, heaps, linked lists and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "practice", "interview", "education"]
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

[tool.hatch.build.targets.wheel]
packages = ["dsapractice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
