[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicdrills"
version = "0.1.0"
description = "Small logic exercises: triangle maximum path sum, L/R/= pattern decoding and a word-counting HTTP service."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "dynamic-programming", "word-count", "puzzles"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicdrills-max-path-sum = "logicdrills.max_path_sum:main"
logicdrills-left-right = "logicdrills.left_right:main"
logicdrills-serve = "logicdrills.rest:main"

[tool.hatch.build.targets.wheel]
packages = ["logicdrills"]

[tool.pytest.ini_options]
addopts = "-ra"
