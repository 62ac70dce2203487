[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmlprolog"
version = "0.1.0"
description = "Role classification for XML prolog and DTD tokens, with name-character and UTF-8 byte tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "dtd", "prolog", "doctype", "state machine", "utf-8"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xmlprolog"]

[tool.pytest.ini_options]
addopts = "-ra"
