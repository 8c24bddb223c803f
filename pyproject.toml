[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golemstage"
version = "0.1.0"
description = "Sprite-sheet animation, effects and stage objects for a side-scrolling boss-fight game"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "sprite", "animation", "side-scroller", "boss"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["golemstage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
