"""Two-dimensional textures loaded from image files."""

from __future__ import annotations

import numpy as np

from blockcraft.resources import load_texture


def _gl():
    from pyglet import gl

    return gl


class Texture:
    """An image uploaded as a repeating, nearest-filtered, mipmapped texture."""

    def __init__(self, path):
        data = load_texture(path, flip_vertically=True)
        self.width = data.width
        self.height = data.height
        self.channels = data.channels

        gl = _gl()
        formats = {1: gl.GL_RED, 2: gl.GL_RG, 3: gl.GL_RGB, 4: gl.GL_RGBA}
        pixel_format = formats[data.channels]

        ids = (gl.GLuint * 1)()
        gl.glGenTextures(1, ids)
        self._texture_id = ids[0]
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture_id)

        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)

        pixels = np.frombuffer(data.pixels, dtype=np.uint8)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            pixel_format,
            data.width,
            data.height,
            0,
            pixel_format,
            gl.GL_UNSIGNED_BYTE,
            pixels.ctypes.data,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def bind(self, slot=0):
        """Bind to the given texture unit."""
        gl = _gl()
        gl.glActiveTexture(gl.GL_TEXTURE0 + slot)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture_id)

    def unbind(self):
        """Unbind any 2D texture from the active unit."""
        gl = _gl()
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def delete(self):
        """Release the texture; safe to call more than once."""
        if self._texture_id:
            gl = _gl()
            gl.glDeleteTextures(1, (gl.GLuint * 1)(self._texture_id))
            self._texture_id = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.delete()