[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockcraft"
version = "0.1.0"
description = "A small voxel block renderer with a free-flying first-person camera"
requires-python = ">=3.10"
keywords = ["voxel", "opengl", "game", "camera", "renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blockcraft = "blockcraft.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blockcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
