[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resembla"
version = "0.1.0"
description = "Building blocks for similar-sentence search: string splitting, measure names and index paths, weighted ensembles and id-tagged results"
requires-python = ">=3.10"
dependencies = []
keywords = ["similarity", "sentence search", "ensemble", "ranking", "simstring"]
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
    "Typing :: Typed",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["resembla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
