[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "steamreview"
version = "0.5.2"
description = "Command-line tool that fetches Steam game reviews, saves them as text or JSON and prints summary statistics"
requires-python = ">=3.10"
keywords = ["steam", "reviews", "cli", "games", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
steam-review = "steamreview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["steamreview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
