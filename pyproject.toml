[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebookkeeper"
version = "0.1.0"
description = "Walk an e-book collection: list files, hash them, strip text from paths and delete duplicates tracked in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["ebook", "duplicates", "sha256", "sqlite", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
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
ebookkeeper = "ebookkeeper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ebookkeeper"]

[tool.pytest.ini_options]
addopts = "-ra"
