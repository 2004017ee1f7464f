[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mithril"
version = "0.1.0"
description = "Small utilities: levelled logging with {} placeholders, hex formatting, numeric constants, profiling and stack traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "hex", "constants", "profiling", "stacktrace", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["mithril"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
