[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vxnoise"
version = "0.1.0"
description = "Seeded simplex and fractal simplex noise in two and three dimensions, with scalar and lane-batched evaluators"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["noise", "simplex", "procedural", "fractal", "terrain", "jenkins-hash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vxnoise"]

[tool.pytest.ini_options]
addopts = "-ra"
