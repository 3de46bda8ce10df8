[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minichain"
version = "0.1.0"
description = "A minimal proof-of-work blockchain with SHA3-256 hashing and an SQLite-backed block store"
requires-python = ">=3.10"
dependencies = [
    "msgpack",
]
keywords = ["blockchain", "proof-of-work", "sha3", "mining", "ledger", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minichain = "minichain.cli:main"
minichain-demo = "minichain.chain:main"

[tool.hatch.build.targets.wheel]
packages = ["minichain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
