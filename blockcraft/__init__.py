"""A single textured block drawn with a free-flying first-person camera."""

__version__ = "0.1.0"
__all__ = [
    "camera",
    "game",
    "input",
    "mesh",
    "renderer",
    "resources",
    "shader",
    "texture",
    "window",
]