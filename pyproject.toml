[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelsim"
version = "0.1.0"
description = "Building blocks for a simulated distributed operating system: kernel, CPU, I/O and memory processes over a simple TCP protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "simulation", "kernel", "sockets", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kernelsim-kernel = "kernelsim.kernel:main"
kernelsim-cpu = "kernelsim.modules:cpu_main"
kernelsim-io = "kernelsim.modules:io_main"
kernelsim-memoria = "kernelsim.modules:memoria_main"

[tool.hatch.build.targets.wheel]
packages = ["kernelsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
