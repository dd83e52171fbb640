[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradebook"
version = "0.1.0"
description = "Merge binary student grade files, sort them by grade and write grade statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["grades", "students", "records", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
gradebook-combine = "gradebook.combine:main"

[tool.hatch.build.targets.wheel]
packages = ["gradebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
