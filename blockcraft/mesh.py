"""Indexed triangle meshes uploaded to GPU buffers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

VERTEX_DTYPE = np.dtype([("position", np.float32, 3), ("tex_coord", np.float32, 2)])


def _gl():
    from pyglet import gl

    return gl


@dataclass(frozen=True)
class Vertex:
    """A point of a mesh with its texture coordinate."""

    position: tuple[float, float, float]
    tex_coord: tuple[float, float]

    def __post_init__(self):
        if len(self.position) != 3:
            raise ValueError("a vertex position has three components")
        if len(self.tex_coord) != 2:
            raise ValueError("a texture coordinate has two components")


def pack_vertices(vertices):
    """Interleave vertices into a structured float32 array ready for upload."""
    return np.array(
        [(vertex.position, vertex.tex_coord) for vertex in vertices],
        dtype=VERTEX_DTYPE,
    )


def _index_array(indices, vertex_count):
    index_array = np.asarray(list(indices), dtype=np.int64)
    if index_array.ndim != 1:
        raise ValueError("indices must be a flat sequence")
    if index_array.size and (index_array.min() < 0 or index_array.max() >= vertex_count):
        raise ValueError("index refers to a vertex that does not exist")
    return index_array.astype(np.uint32)


class Mesh:
    """Vertex array with its vertex and element buffers."""

    def __init__(self, vertices, indices):
        packed = pack_vertices(vertices)
        index_array = _index_array(indices, len(packed))

        gl = _gl()
        vao = (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, vao)
        buffers = (gl.GLuint * 2)()
        gl.glGenBuffers(2, buffers)
        self._vao = vao[0]
        self._vbo, self._ebo = buffers[0], buffers[1]

        gl.glBindVertexArray(self._vao)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, packed.nbytes, packed.ctypes.data, gl.GL_STATIC_DRAW)

        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, index_array.nbytes, index_array.ctypes.data, gl.GL_STATIC_DRAW
        )

        stride = VERTEX_DTYPE.itemsize
        for location, field in enumerate(VERTEX_DTYPE.names):
            subtype, offset = VERTEX_DTYPE.fields[field][:2]
            components = subtype.shape[0]
            gl.glVertexAttribPointer(location, components, gl.GL_FLOAT, gl.GL_FALSE, stride, offset)
            gl.glEnableVertexAttribArray(location)

        gl.glBindVertexArray(0)
        self.index_count = int(index_array.size)

    def draw(self):
        """Draw the mesh as triangles."""
        gl = _gl()
        gl.glBindVertexArray(self._vao)
        gl.glDrawElements(gl.GL_TRIANGLES, self.index_count, gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)

    def delete(self):
        """Release the GPU objects; safe to call more than once."""
        if not (self._vao or self._vbo or self._ebo):
            return
        gl = _gl()
        if self._ebo:
            gl.glDeleteBuffers(1, (gl.GLuint * 1)(self._ebo))
        if self._vbo:
            gl.glDeleteBuffers(1, (gl.GLuint * 1)(self._vbo))
        if self._vao:
            gl.glDeleteVertexArrays(1, (gl.GLuint * 1)(self._vao))
        self._vao = self._vbo = self._ebo = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.delete()