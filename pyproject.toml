[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgl"
version = "0.1.0"
description = "Small graphics toolkit: vectors, matrices, quaternions, colours, on-screen text state and renderer interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "vector", "matrix", "quaternion", "rendering", "linear algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
