[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glsim"
version = "0.1.0"
description = "Entity-component registry, 3D vector and matrix math, transforms, cameras, bounding boxes and mesh primitives"
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "simulation", "linear-algebra", "frustum-culling", "mesh"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glsim-bundler = "glsim.bundler:main"

[tool.hatch.build.targets.wheel]
packages = ["glsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
