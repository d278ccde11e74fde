[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternshowcase"
version = "1.0.0"
description = "Small, runnable demonstrations of the classic object-oriented design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "gang of four",
    "education",
    "object-oriented",
    "examples",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternshowcase = "patternshowcase.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["patternshowcase"]

[tool.hatch.build.targets.sdist]
include = ["patternshowcase", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
