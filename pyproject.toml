[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rompler"
version = "0.1.0"
description = "A small sample-based keyboard instrument that plays pitched audio samples from the terminal"
requires-python = ">=3.10"
keywords = ["sampler", "rompler", "music", "synthesizer", "curses", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rompler = "rompler.main:main"

[tool.hatch.build.targets.wheel]
packages = ["rompler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
