[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volmgmt"
version = "0.1.0"
description = "Windows volume and file system management primitives: I/O control codes, file attributes, file identifiers and MFT scan helpers"
requires-python = ">=3.10"
keywords = [
    "windows",
    "ntfs",
    "refs",
    "ioctl",
    "fsctl",
    "file-attributes",
    "file-id",
    "filetime",
    "mft",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]
dependencies = [
    "python-dateutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["volmgmt"]

[tool.pytest.ini_options]
addopts = "-ra"
