[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charkit"
version = "0.1.0"
description = "Small character, string and bit-twiddling filters: tab expansion, line folding, hex parsing and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "filter", "tabs", "detab", "entab", "fold", "hex", "bits"]
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
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
charkit-detab = "charkit.tabs:detab_main"
charkit-entab = "charkit.tabs:entab_main"
charkit-fold = "charkit.fold:main"
charkit-ranges = "charkit.ranges:main"
charkit-htoi = "charkit.hexconv:main"
charkit-squeeze = "charkit.strings:squeeze_main"
charkit-any = "charkit.strings:any_main"
charkit-bits = "charkit.bits:main"

[tool.hatch.build.targets.wheel]
packages = ["charkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
