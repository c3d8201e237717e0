[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dryad"
version = "0.1.0"
description = "Native function registry for the Dryad language and the Oak project manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["dryad", "native-functions", "runtime", "project-manager", "oak"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oak = "dryad.oak:main"

[tool.hatch.build.targets.wheel]
packages = ["dryad"]

[tool.pytest.ini_options]
addopts = "-ra"
