[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syncdemos"
version = "0.1.0"
description = "Classic concurrency problems solved with threads: producer/consumer, readers/writers and dining philosophers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threads",
    "semaphore",
    "condition-variable",
    "producer-consumer",
    "readers-writers",
    "dining-philosophers",
    "bankers-algorithm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syncdemos-producer-consumer = "syncdemos.producer_consumer:main"
syncdemos-readers-writers = "syncdemos.readers_writers:main"
syncdemos-dining = "syncdemos.dining:main"

[tool.hatch.build.targets.wheel]
packages = ["syncdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
