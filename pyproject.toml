[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cerealize"
version = "0.1.0"
description = "Build compact JSON documents from plain values, sequences and objects that describe their own fields."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serialization", "serializer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cerealize-demo = "cerealize.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["cerealize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
