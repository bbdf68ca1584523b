[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "globalcoin"
version = "0.1.0"
description = "Wallet building blocks for a small coin: SHA3 hashes, Merkle roots, compact targets, binary buffers, secp256k1 key derivation, seed phrases, encryption and chunk storage"
requires-python = ">=3.10"
keywords = [
    "wallet",
    "merkle",
    "sha3",
    "secp256k1",
    "key-derivation",
    "seed-phrase",
    "chacha20-poly1305",
    "argon2",
    "storage",
]
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
    "Framework :: AsyncIO",
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["globalcoin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
