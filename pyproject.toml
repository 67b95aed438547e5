[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webpshot"
version = "1.0.0"
description = "Data model for screenshot capture and WebP encoding: displays, pixel formats, raw images, encoder settings and capture statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["screenshot", "webp", "capture", "image", "display"]
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
    "Topic :: Multimedia :: Graphics :: Capture :: Screen Capture",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["webpshot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
