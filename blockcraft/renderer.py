"""Draws the textured test block."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from blockcraft.mesh import Mesh, Vertex
from blockcraft.shader import Shader
from blockcraft.texture import Texture

ASSETS = Path("Assets")
BLOCK_VERTEX_SHADER = ASSETS / "shaders" / "block.vert"
BLOCK_FRAGMENT_SHADER = ASSETS / "shaders" / "block.frag"
BLOCK_TEXTURE = ASSETS / "textures" / "uv_test.png"

CLEAR_COLOR = (0.2, 0.3, 0.8, 1.0)

_CUBE_FACES = (
    # front
    (((-0.5, -0.5, 0.5), (0.0, 0.0)), ((0.5, -0.5, 0.5), (1.0, 0.0)),
     ((0.5, 0.5, 0.5), (1.0, 1.0)), ((-0.5, 0.5, 0.5), (0.0, 1.0))),
    # back
    (((-0.5, -0.5, -0.5), (1.0, 0.0)), ((0.5, -0.5, -0.5), (0.0, 0.0)),
     ((0.5, 0.5, -0.5), (0.0, 1.0)), ((-0.5, 0.5, -0.5), (1.0, 1.0))),
    # left
    (((-0.5, -0.5, -0.5), (0.0, 0.0)), ((-0.5, -0.5, 0.5), (1.0, 0.0)),
     ((-0.5, 0.5, 0.5), (1.0, 1.0)), ((-0.5, 0.5, -0.5), (0.0, 1.0))),
    # right
    (((0.5, -0.5, 0.5), (0.0, 0.0)), ((0.5, -0.5, -0.5), (1.0, 0.0)),
     ((0.5, 0.5, -0.5), (1.0, 1.0)), ((0.5, 0.5, 0.5), (0.0, 1.0))),
    # top
    (((-0.5, 0.5, 0.5), (0.0, 0.0)), ((0.5, 0.5, 0.5), (1.0, 0.0)),
     ((0.5, 0.5, -0.5), (1.0, 1.0)), ((-0.5, 0.5, -0.5), (0.0, 1.0))),
    # bottom
    (((-0.5, -0.5, -0.5), (0.0, 0.0)), ((0.5, -0.5, -0.5), (1.0, 0.0)),
     ((0.5, -0.5, 0.5), (1.0, 1.0)), ((-0.5, -0.5, 0.5), (0.0, 1.0))),
)

_QUAD_INDICES = (0, 1, 2, 2, 3, 0)


def cube_geometry():
    """Return the vertices and triangle indices of a unit cube centred at the origin."""
    vertices = [Vertex(position, tex_coord) for face in _CUBE_FACES for position, tex_coord in face]
    indices = [
        face_number * 4 + corner
        for face_number in range(len(_CUBE_FACES))
        for corner in _QUAD_INDICES
    ]
    return vertices, indices


def _gl():
    from pyglet import gl

    return gl


class Renderer:
    """Owns the block shader, texture and mesh and draws one frame at a time."""

    def __init__(self):
        self._shader = None
        self._texture = None
        self._mesh = None

    def initialize(self):
        """Load the block assets and set up depth testing."""
        shader = Shader(BLOCK_VERTEX_SHADER, BLOCK_FRAGMENT_SHADER)
        try:
            texture = Texture(BLOCK_TEXTURE)
        except Exception:
            shader.delete()
            raise
        vertices, indices = cube_geometry()
        self._shader = shader
        self._texture = texture
        self._mesh = Mesh(vertices, indices)

        gl = _gl()
        gl.glEnable(gl.GL_DEPTH_TEST)

    def render(self, view_proj_matrix):
        """Clear the frame and draw the block with the given view-projection matrix."""
        if self._shader is None or self._texture is None or self._mesh is None:
            raise RuntimeError("renderer is not initialized")

        gl = _gl()
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glClearColor(*CLEAR_COLOR)

        self._shader.bind()
        self._texture.bind(0)
        self._shader.set_int("uTexture", 0)
        self._shader.set_mat4("uViewProj", view_proj_matrix)
        self._shader.set_mat4("uModel", np.eye(4))

        self._mesh.draw()

        self._shader.unbind()
        self._texture.unbind()

    def shutdown(self):
        """Release everything the renderer loaded."""
        for resource in (self._mesh, self._texture, self._shader):
            if resource is not None:
                resource.delete()
        self._mesh = None
        self._texture = None
        self._shader = None