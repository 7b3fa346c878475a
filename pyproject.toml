[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttyutil"
version = "0.1.0"
description = "Terminal helpers: pseudo-terminals, raw mode, locale checks, full writes and a frozen monotonic timestamp"
requires-python = ">=3.10"
dependencies = []
keywords = ["pty", "terminal", "termios", "locale", "timestamp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inpty = "ttyutil.pty_compat:main"
is-utf8-locale = "ttyutil.locale_utils:main"

[tool.hatch.build.targets.wheel]
packages = ["ttyutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
