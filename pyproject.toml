[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linmath3d"
version = "0.1.0"
description = "Small pure-Python linear algebra for 3D graphics: vectors, quaternion products and affine transforms."
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "graphics", "3d", "matrix", "vector", "affine", "quaternion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linmath3d"]

[tool.pytest.ini_options]
addopts = "-ra"
