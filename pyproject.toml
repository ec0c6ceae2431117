[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pfckit"
version = "0.1.0"
description = "Foundation utilities: byte order, audio sample math, AVL trees, bit arrays, sorting, base64, GUIDs, path helpers and POSIX descriptor tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl-tree", "bit-array", "base64", "guid", "byte-order", "audio", "sorting", "paths", "poll"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pfckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
