[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procsentry"
version = "0.1.0"
description = "Watch running processes and flag executables whose path and SHA-256 match a CSV watch list"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["security", "processes", "sha256", "monitoring", "watch-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
procsentry = "procsentry.app:main"

[tool.hatch.build.targets.wheel]
packages = ["procsentry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
