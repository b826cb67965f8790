[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hirestext"
version = "0.5.0"
description = "Software text screen rendered into 1-bpp and 4-bpp bitmap buffers, with a VT52 interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["text screen", "bitmap font", "vt52", "framebuffer", "terminal"]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hirestext"]

[tool.pytest.ini_options]
addopts = "-ra"
