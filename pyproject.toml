[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mycontainers"
version = "0.1.0"
description = "A simple container with several traversal orders: ascending, descending, insertion, reverse, side-cross and middle-out."
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "iterator", "ordering", "traversal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mycontainers-demo = "mycontainers.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["mycontainers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
