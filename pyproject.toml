[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fileuploadsys"
version = "0.1.0"
description = "Split files into fixed-size chunks on disk and serve a minimal HTTP upload endpoint"
requires-python = ">=3.10"
dependencies = []
keywords = ["upload", "chunking", "http", "file-splitting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fileuploadsys = "fileuploadsys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fileuploadsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
