[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxtive-web"
version = "0.6.2"
description = "Helpers for web services: multipart upload parsing and validation, uniform JSON responses and HTTP error mapping"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "multipart", "file-upload", "validation", "json", "responses"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["foxtive_web"]

[tool.pytest.ini_options]
addopts = "-ra"
