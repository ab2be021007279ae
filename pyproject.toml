[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emartident"
version = "0.1.1"
description = "A small workspace-based desktop front-end that browses customer records served as JSON over HTTP"
requires-python = ">=3.10"
dependencies = []
keywords = ["desktop", "workspace", "customers", "database", "front-end", "json", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
emartident = "emartident.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["emartident"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
