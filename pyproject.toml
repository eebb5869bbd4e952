[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myls"
version = "0.1.0"
description = "A small directory lister with plain, all-entries and long listing modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "filesystem", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myls = "myls.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["myls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
