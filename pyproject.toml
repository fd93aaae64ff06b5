[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oddments"
version = "0.1.0"
description = "Small utilities: version-aware string ordering, multiset comparison, wavelength colours, reference counting, run-time borrow checking, tail calls and list scrolling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "version sorting",
    "natural sort",
    "multiset",
    "wavelength",
    "rgb",
    "reference counting",
    "borrowing",
    "tail call",
    "scrolling",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wavelength-table = "oddments.wavelength_table:main"
scrolling-demo = "oddments.scrolling_ui:main"

[tool.hatch.build.targets.wheel]
packages = ["oddments"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
