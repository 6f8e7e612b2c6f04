"""A small sprite-batching 2D game skeleton rendered with OpenGL through pyglet."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "assets",
    "bump_allocator",
    "files",
    "input",
    "logger",
    "render_interface",
    "renderer",
    "utils",
    "vectors",
]