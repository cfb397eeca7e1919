[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoviz"
version = "0.1.0"
description = "Step-by-step traces of classic sorting and searching algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "education", "visualization", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
packages = ["algoviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
