[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frostlearn"
version = "0.1.0"
description = "Tabular Q-learning on a randomly generated, slippery Frozen Lake grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["reinforcement-learning", "q-learning", "frozen-lake", "gridworld"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
frostlearn = "frostlearn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["frostlearn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
