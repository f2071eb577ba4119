[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "camshake"
version = "7.0.0"
description = "Trauma-based camera shake for 2D and 3D game cameras"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "camera", "shake", "trauma", "noise"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["camshake"]

[tool.pytest.ini_options]
addopts = "-ra"
