[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trackerkit"
version = "0.1.0"
description = "Building blocks for GPS tracker firmware: checksums, a JSON tree, GPS queue, settings, log files and a debug command shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["gps", "tracker", "embedded", "adler32", "crc", "json", "modem", "rtc"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trackerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
