[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xv6tools"
version = "0.1.0"
description = "User tools, RISC-V paging arithmetic, ELF header parsing, a free-list allocator and a shell parser from a small teaching operating system"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "education",
    "risc-v",
    "sv39",
    "shell",
    "grep",
    "malloc",
    "elf",
    "printf",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv6-cat = "xv6tools.fileutils:cat_main"
xv6-echo = "xv6tools.fileutils:echo_main"
xv6-wc = "xv6tools.fileutils:wc_main"
xv6-mkdir = "xv6tools.fileutils:mkdir_main"
xv6-rm = "xv6tools.fileutils:rm_main"
xv6-ln = "xv6tools.fileutils:ln_main"
xv6-sleep = "xv6tools.fileutils:sleep_main"
xv6-grep = "xv6tools.grep:main"
xv6-ls = "xv6tools.walk:ls_main"
xv6-find = "xv6tools.walk:find_main"
xv6-primes = "xv6tools.sieve:main"

[tool.hatch.build.targets.wheel]
packages = ["xv6tools"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
