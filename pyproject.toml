[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatpane"
version = "0.1.0"
description = "Terminal chat and model-management UI building blocks: layout, text wrapping, spinners, thinking-block parsing and cell-grid rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "layout", "chat", "spinner", "rendering", "canvas"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chatpane"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
