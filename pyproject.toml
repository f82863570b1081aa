[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvutils"
version = "0.1.0"
description = "Teaching-OS text utilities, a shell command parser, virtio block structures and small helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "teaching",
    "grep",
    "shell",
    "parser",
    "virtio",
    "printf",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvutils.pattern:main"
xv-wc = "xvutils.textutil:wc_main"
xv-cat = "xvutils.textutil:cat_main"
xv-echo = "xvutils.textutil:echo_main"
xv-ls = "xvutils.listing:main"

[tool.hatch.build.targets.wheel]
packages = ["xvutils"]

[tool.hatch.build.targets.sdist]
include = ["xvutils", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
