[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfontreader"
version = "0.1.0"
description = "Reader for SoundFont 2 (sf2) files: RIFF structure, hydra records and a preset/instrument view"
requires-python = ">=3.10"
dependencies = []
keywords = ["soundfont", "sf2", "riff", "midi", "audio", "synthesizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sfontreader = "sfontreader.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sfontreader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
