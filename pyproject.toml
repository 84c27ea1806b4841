[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ansiw32"
version = "0.1.0"
description = "Interpret ANSI escape sequences against an in-memory console model: colours, cursor movement and erasing"
requires-python = ">=3.10"
dependencies = []
keywords = ["ansi", "escape", "terminal", "console", "color"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ansiw32 = "ansiw32.writer:main"

[tool.hatch.build.targets.wheel]
packages = ["ansiw32"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
