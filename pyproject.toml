[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowind"
version = "0.1.0"
description = "Flow indicator tool for test programs: pattern list, pmfl and burst file inspection"
requires-python = ">=3.10"
dependencies = []
keywords = ["test program", "burst", "pmfl", "plist", "patterns", "ate"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flow-indicator = "flowind.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flowind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
