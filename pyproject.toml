[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacerocks"
version = "0.1.0"
description = "A small asteroid-shooting arcade game built on pygame"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "asteroids", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spacerocks = "spacerocks.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spacerocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
