[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minegocio"
version = "0.1.0"
description = "Interactive console point-of-sale for loading brands, products, payment methods and sales, with sales reports"
requires-python = ">=3.10"
keywords = ["point-of-sale", "sales", "inventory", "reports", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minegocio = "minegocio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minegocio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
