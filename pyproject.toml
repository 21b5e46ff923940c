[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dtlsproto"
version = "0.1.0"
description = "DTLS 1.2 message encoding, handshake fragment reassembly, hello extensions, cipher suites and AES-GCM record protection"
requires-python = ">=3.10"
keywords = ["dtls", "tls", "handshake", "aes-gcm", "protocol", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Networking",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dtlsproto"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
