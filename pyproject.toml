[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daikin_ir"
version = "0.1.0"
description = "Build, encode and decode infrared command frames for Daikin air conditioners"
requires-python = ">=3.10"
dependencies = []
keywords = ["daikin", "infrared", "ir", "air-conditioner", "remote-control", "home-automation"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["daikin_ir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
