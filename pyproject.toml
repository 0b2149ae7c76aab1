[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avrcore"
version = "0.1.0"
description = "Host-side models of a microcontroller core: strings, character helpers, math helpers, USB descriptors, a CDC serial function and tone timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["avr", "usb", "cdc", "descriptors", "embedded", "tone", "strings"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["avrcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
