[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sel4kit"
version = "0.1.0"
description = "Boot-image utilities: CPIO metadata stripping, FDT header sizing, MD5/SHA-256 digests, a minimal printf dialect and C string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpio", "fdt", "device-tree", "md5", "sha256", "printf", "bootloader", "reproducible-builds"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Boot",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpio-strip = "sel4kit.cpio_strip:main"

[tool.hatch.build.targets.wheel]
packages = ["sel4kit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
