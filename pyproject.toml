[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ymbase"
version = "0.1.0"
description = "Basic utilities: JSON values, binary encoding, a Mersenne Twister generator, file locations, binders and interval timers"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "binary", "mt19937", "random", "file-location", "observer", "timer"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ymbase"]

[tool.pytest.ini_options]
addopts = "-ra"
