[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clog"
version = "0.1.0"
description = "A small observer-pattern library with a workspace helper for installing git hooks and tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["observer", "design-patterns", "events", "git-hooks"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clog = "clog.observer:main"
clog-xtask = "clog.xtask:main"

[tool.hatch.build.targets.wheel]
packages = ["clog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
