[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoledrills"
version = "0.1.0"
description = "Small terminal games and calculators: 2048, rock-paper-scissors, number guessing, banking and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "console", "terminal", "games", "calculators", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drill-2048 = "consoledrills.game:main"
drill-bank = "consoledrills.banking:main"
drill-rps = "consoledrills.rps:main"
drill-circle = "consoledrills.calculators:circle_main"
drill-interest = "consoledrills.calculators:interest_main"
drill-weight = "consoledrills.calculators:weight_main"
drill-guess = "consoledrills.guessing:main"
drill-rng = "consoledrills.guessing:rng_main"
drill-cart = "consoledrills.shopping:main"
drill-exercises = "consoledrills.exercises:main"

[tool.hatch.build.targets.wheel]
packages = ["consoledrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
