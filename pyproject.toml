[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniatari"
version = "0.1.0"
description = "Logic of a tiny handheld game console: snake, menus, joystick input and a 128x64 monochrome screen model"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "snake", "arcade", "oled", "menu", "joystick"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["miniatari"]

[tool.pytest.ini_options]
addopts = "-ra"
