[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demokit"
version = "0.1.0"
description = "Small algorithms, design-pattern examples and toy applications: sorting, dynamic programming, a Bloom filter, stream pipelines, a music library, a game centre and a crawler."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "design-patterns",
    "bloom-filter",
    "external-sort",
    "pipeline",
    "dynamic-programming",
    "crawler",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
demokit-sort = "demokit.sorting:main"
demokit-externsort = "demokit.externsort:main"
demokit-music = "demokit.musicplayer_cli:main"
demokit-cgss = "demokit.cgss_cli:main"
demokit-crawl = "demokit.crawlengine:main"

[tool.hatch.build.targets.wheel]
packages = ["demokit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
