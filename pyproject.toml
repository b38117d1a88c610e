[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Classic data structures, small threading demos, a file-serving HTTP server and an orbit simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "queue",
    "stack",
    "dynamic-array",
    "http-server",
    "threading",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-doubly-linked-list = "labkit.doubly_linked_list:main"
labkit-singly-linked-list = "labkit.singly_linked_list:main"
labkit-dynamic-array = "labkit.dynamic_array:main"
labkit-queue = "labkit.linked_queue:main"
labkit-stack = "labkit.stack:main"
labkit-circular-list = "labkit.circular_list:main"
labkit-mpsc = "labkit.mpsc:main"
labkit-tasks = "labkit.tasks:main"
labkit-primes = "labkit.primes:main"
labkit-client = "labkit.client:main"
labkit-solar-system = "labkit.solar_system:main"
labkit-serve = "labkit.http_server:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.hatch.build.targets.sdist]
include = ["labkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
