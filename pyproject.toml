[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cylinview"
version = "0.1.0"
description = "Frame rendering and device protocol helpers for a rotating cylindrical display built from many small monochrome panels"
requires-python = ">=3.10"
dependencies = []
keywords = ["display", "monochrome", "framebuffer", "persistence-of-vision", "drawing", "crc16", "xorshift"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cylinview"]

[tool.pytest.ini_options]
addopts = "-ra"
