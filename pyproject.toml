[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exerkit"
version = "0.1.0"
description = "Small classic programming exercises on strings, numbers and lists"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "strings",
    "palindrome",
    "anagram",
    "factorial",
    "fibonacci",
    "number-base",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exerkit = "exerkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exerkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
