[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "integral"
version = "0.1.0"
description = "Chess engine building blocks: board value types, sliding-piece attacks, magic number search, Zobrist keys and support utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic-bitboards", "zobrist", "mersenne-twister"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
integral-magics = "integral.magics.finder:main"

[tool.hatch.build.targets.wheel]
packages = ["integral"]

[tool.pytest.ini_options]
addopts = "-ra"
