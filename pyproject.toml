[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treeprint"
version = "0.1.0"
description = "Compose and render ASCII trees, including trees built from dataclass instances."
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "ascii", "text", "rendering", "dataclass"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["treeprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
