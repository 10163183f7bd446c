"""Graphics toolkit: vectors, matrices, quaternions, colours, on-screen text state and renderers."""

__version__ = "0.1.0"
__all__ = [
    "base64",
    "color",
    "examples",
    "matrix",
    "misc",
    "osdtext",
    "quaternion",
    "renderer",
    "vector",
]