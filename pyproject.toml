[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavehunter"
version = "0.1.0"
description = "A top-down wave survival arcade game with auto-firing bullet rings, bosses and level-up upgrades."
requires-python = ">=3.10"
keywords = ["game", "arcade", "roguelike", "survival", "pygame", "waves"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wavehunter = "wavehunter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wavehunter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
