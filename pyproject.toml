[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledremote"
version = "0.1.0"
description = "Single-button remote control logic and LED strip effects for networked light installations"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "debounce", "button", "lighting", "effects", "remote"]
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
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ledremote"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
