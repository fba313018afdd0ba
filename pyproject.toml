[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resumable"
version = "0.1.0"
description = "Building blocks for a tus resumable upload server: protocol extensions, checksums, header helpers and file storage."
requires-python = ">=3.10"
dependencies = []
keywords = ["tus", "resumable", "upload", "http", "storage", "checksum"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["resumable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
