[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msimkit"
version = "0.1.0"
description = "Building blocks for messaging servers: growable ring buffers and pools, a batching data pipeline, slot bitmaps, rate limiters, AES-CBC helpers and small utilities."
requires-python = ">=3.10"
keywords = ["ring-buffer", "buffer-pool", "rate-limiter", "bitmap", "aes", "curve25519", "messaging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "cryptography",
    "requests",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["msimkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
