[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketkit"
version = "0.1.0"
description = "A pocket collection of small command-line tools and helper libraries: line counting, echo, unit conversion, fetching, tiny web servers, fractals, bzip2 compression and more."
requires-python = ">=3.10"
dependencies = [
    "pillow",
    "jinja2",
]
keywords = [
    "utilities",
    "cli",
    "temperature",
    "popcount",
    "mandelbrot",
    "lissajous",
    "bzip2",
    "wsgi",
]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pk-dup = "pocketkit.dup:main"
pk-echo = "pocketkit.echo:main"
pk-cf = "pocketkit.cf:main"
pk-length = "pocketkit.lengthconv:main"
pk-fetch = "pocketkit.fetch:main"
pk-server = "pocketkit.servers:main"
pk-lissajous = "pocketkit.lissajous:main"
pk-mandelbrot = "pocketkit.mandelbrot:main"
pk-basename = "pocketkit.basename:main"
pk-comma = "pocketkit.comma:main"
pk-surface = "pocketkit.surface:main"
pk-slices = "pocketkit.slices:main"
pk-charcount = "pocketkit.charcount:main"
pk-dedup = "pocketkit.dedup:main"
pk-issues = "pocketkit.issues:main"
pk-jpeg = "pocketkit.jpeg:main"
pk-bzip = "pocketkit.bzip:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
