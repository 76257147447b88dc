[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-systems lab tools: CPU scheduling simulator, two small Unix shells, a word counter and a first-fit heap allocator model"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "fcfs",
    "round-robin",
    "sjf",
    "srtf",
    "mlfq",
    "shell",
    "allocator",
    "operating-systems",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-sim = "oslab.simulator:main"
oslab-experiments = "oslab.experiments:main"
oslab-intsched = "oslab.intsched:main"
oslab-wc = "oslab.wc:main"
oslab-alloc = "oslab.allocator:main"
oslab-shell = "oslab.shell:main"
oslab-refshell = "oslab.refshell:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
