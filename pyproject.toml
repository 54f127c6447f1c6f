[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolekit"
version = "0.1.0"
description = "A small collection of interactive console programs: calculator, grading, word count, number guessing and movie ticket booking."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "calculator", "grading", "word-count", "guessing-game", "ticket-booking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolekit-calc = "consolekit.calculator:main"
consolekit-grade = "consolekit.grading:main"
consolekit-wordcount = "consolekit.wordcount:main"
consolekit-guess = "consolekit.guessing:main"
consolekit-movies = "consolekit.moviebooking:main"

[tool.hatch.build.targets.wheel]
packages = ["consolekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
