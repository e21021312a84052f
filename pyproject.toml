[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bullethell"
version = "0.1.0"
description = "A vertical bullet-hell shooter with data-driven enemy types, levels and waves"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "bullet-hell", "arcade", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bullethell = "bullethell.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bullethell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
