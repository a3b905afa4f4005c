[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyhttpd"
version = "0.1.0"
description = "A small threaded HTTP server that serves static files and does integer arithmetic over URLs"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "static files", "threading", "calculator"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyhttpd = "tinyhttpd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyhttpd"]

[tool.pytest.ini_options]
addopts = "-ra"
