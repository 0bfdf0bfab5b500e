[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knxbuzzer"
version = "0.1.0"
description = "Configuration model, parameter decoding, scheduling and logging for a KNX-controlled RTTTL buzzer"
requires-python = ">=3.10"
dependencies = []
keywords = ["knx", "buzzer", "rtttl", "melody", "home automation", "parameters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["knxbuzzer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
