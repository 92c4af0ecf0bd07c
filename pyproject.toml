[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iats"
version = "0.1.0"
description = "Antenna-tracker building blocks: checksums, FEC, varints, filters, geodesy and in-memory peripheral models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "antenna-tracker",
    "crc",
    "fec",
    "uvarint",
    "kalman",
    "low-pass-filter",
    "easing",
    "gpio",
    "pwm",
    "ws2812",
    "i2c",
    "spi",
]
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
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iats"]

[tool.hatch.build.targets.sdist]
include = ["iats", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
