"""GLSL shader programs built from source files."""

from __future__ import annotations

import numpy as np

from blockcraft.resources import load_shader


class ShaderError(Exception):
    """A shader could not be read, compiled or linked."""


class Shader:
    """A linked vertex and fragment program."""

    def __init__(self, vertex_path, fragment_path):
        vertex_source = load_shader(vertex_path)
        if not vertex_source:
            raise ShaderError(f"vertex shader {vertex_path} is empty")
        fragment_source = load_shader(fragment_path)
        if not fragment_source:
            raise ShaderError(f"fragment shader {fragment_path} is empty")

        from pyglet.graphics.shader import Shader as StageShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            self._program = ShaderProgram(
                StageShader(vertex_source, "vertex"),
                StageShader(fragment_source, "fragment"),
            )
        except ShaderException as exc:
            raise ShaderError(str(exc)) from exc

    def bind(self):
        """Make the program current; does nothing once deleted."""
        if self._program is not None:
            self._program.use()

    def unbind(self):
        """Leave no program current."""
        if self._program is not None:
            self._program.stop()

    def _has_uniform(self, name):
        return self._program is not None and name in self._program.uniforms

    def set_mat4(self, name, matrix):
        """Set a 4x4 matrix uniform from a row-major matrix; unknown names are ignored."""
        if not self._has_uniform(name):
            return
        column_major = np.asarray(matrix, dtype=np.float32).reshape(4, 4).flatten(order="F")
        self._program[name] = tuple(float(value) for value in column_major)

    def set_int(self, name, value):
        """Set an integer uniform; unknown names are ignored."""
        if not self._has_uniform(name):
            return
        self._program[name] = int(value)

    def delete(self):
        """Release the program; safe to call more than once."""
        if self._program is not None:
            self._program.delete()
            self._program = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.delete()