[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "varcalc"
version = "1.0.0"
description = "HTTP service that evaluates lists of variable-assignment instructions concurrently"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "http", "json", "concurrency", "expressions"]
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

[project.scripts]
varcalc-server = "varcalc.server:main"

[tool.hatch.build.targets.wheel]
packages = ["varcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
