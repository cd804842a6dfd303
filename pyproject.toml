[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ryan"
version = "0.1.0"
description = "Ollama HTTP client and immutable state objects for a terminal chat interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["ollama", "llm", "chat", "tui", "client"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ryan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
