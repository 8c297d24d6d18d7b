[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dualkeyremap"
version = "0.1.0"
description = "Dual-role key remapping: one meaning when a key is tapped alone, another when held with other input"
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard", "remap", "capslock", "escape", "ctrl", "dual-role"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dualkeyremap = "dualkeyremap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dualkeyremap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
