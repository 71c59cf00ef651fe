[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftssl"
version = "0.1.0"
description = "Command-line MD5 and SHA-256 message digests with openssl-style output"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "sha256", "hash", "digest", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ft_ssl = "ftssl.workflow:main"

[tool.hatch.build.targets.wheel]
packages = ["ftssl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
