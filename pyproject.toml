[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soupdl"
version = "0.6.0"
description = "Map, save-file, tile, HUD and screen logic for the SoupDL side-scrolling platformer"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "tile-map", "map-format", "save-file"]
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
test = ["pytest"]

[project.scripts]
soupdl = "soupdl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["soupdl"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
