[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vimcanvas"
version = "0.1.0"
description = "Drawing-independent logic for a graphical editor front end: easing, guifont parsing, redraw scheduling, cursor blink timing and effects, frame statistics and crash reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "gui", "cursor", "animation", "easing", "guifont", "particles", "blink"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vimcanvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
