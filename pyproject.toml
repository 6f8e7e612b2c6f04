[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "celestegame"
version = "0.1.0"
description = "A small sprite-batching 2D game skeleton rendered with OpenGL."
requires-python = ">=3.10"
keywords = ["game", "opengl", "sprites", "2d", "renderer", "pyglet"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
celestegame = "celestegame.application:main"

[tool.hatch.build.targets.wheel]
packages = ["celestegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
