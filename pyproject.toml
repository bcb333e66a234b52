[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partyframe"
version = "0.1.0"
description = "A small 2D game framework with bouncing balls, sprite faces, input bindings, WAV sound slots and PNG texture loading"
requires-python = ">=3.10"
keywords = ["game", "framework", "pygame", "2d", "sprites", "input", "png", "wave"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
partyframe = "partyframe.game:main"

[tool.hatch.build.targets.wheel]
packages = ["partyframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
