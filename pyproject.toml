[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bikescen"
version = "0.1.0"
description = "Generate stochastic bike-sharing trip scenarios from origin-destination arrival rates"
requires-python = ">=3.10"
keywords = ["bike-sharing", "scenarios", "poisson", "stochastic", "rebalancing", "instances"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "scipy",
]

[project.scripts]
bikescen = "bikescen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bikescen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
