[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nftsim"
version = "0.1.0"
description = "A terminal NFT marketplace simulator with paging, sorting and search"
requires-python = ">=3.10"
dependencies = []
keywords = ["nft", "simulator", "marketplace", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nftsim = "nftsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nftsim"]

[tool.pytest.ini_options]
addopts = "-ra"
