[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harmonylab"
version = "0.1.0"
description = "Interactive piano and guitar explorer for scales, chords and the circle of fifths"
requires-python = ">=3.10"
keywords = ["music", "theory", "scales", "chords", "piano", "guitar", "circle-of-fifths"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Multimedia :: Sound/Audio",
]
dependencies = [
    "pygame",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
harmonylab = "harmonylab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["harmonylab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
