[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poemconf"
version = "0.1.0"
description = "Environment-aware TOML configuration loading for web applications"
requires-python = ">=3.11"
dependencies = []
keywords = ["configuration", "toml", "environment", "settings", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
poemconf = "poemconf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["poemconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
