import numpy as np
import pytest

from blockcraft.renderer import (
    BLOCK_FRAGMENT_SHADER,
    BLOCK_VERTEX_SHADER,
    Renderer,
    cube_geometry,
)
from blockcraft.shader import ShaderError


def _faces(items):
    return list(zip(*[iter(items)] * 4))


def test_cube_has_six_quads():
    vertices, indices = cube_geometry()
    assert len(vertices) == 24
    assert len(indices) == 36
    assert sorted(set(indices)) == list(range(len(vertices)))


def test_first_face_indices_match_source():
    _, indices = cube_geometry()
    assert indices[:6] == [0, 1, 2, 2, 3, 0]
    assert indices[-6:] == [20, 21, 22, 22, 23, 20]


def test_every_triangle_stays_on_one_face():
    _, indices = cube_geometry()
    for triangle in zip(*[iter(indices)] * 3):
        assert len({index // 4 for index in triangle}) == 1


def test_every_face_is_planar_at_half_unit():
    vertices, _ = cube_geometry()
    for face in _faces(vertices):
        positions = np.array([vertex.position for vertex in face])
        flat_axes = [
            axis
            for axis in range(3)
            if np.allclose(positions[:, axis], positions[0, axis])
        ]
        assert len(flat_axes) == 1
        assert abs(positions[0, flat_axes[0]]) == 0.5


def test_texture_coordinates_span_whole_image_per_face():
    vertices, _ = cube_geometry()
    for face in _faces(vertices):
        coords = {vertex.tex_coord for vertex in face}
        assert coords == {(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)}


def test_render_before_initialize_fails():
    with pytest.raises(RuntimeError):
        Renderer().render(np.eye(4))


def test_initialize_without_assets_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    renderer = Renderer()
    with pytest.raises(FileNotFoundError):
        renderer.initialize()
    with pytest.raises(RuntimeError):
        renderer.render(np.eye(4))


def test_initialize_with_empty_shader_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    vertex = tmp_path / BLOCK_VERTEX_SHADER
    vertex.parent.mkdir(parents=True)
    vertex.write_text("")
    (tmp_path / BLOCK_FRAGMENT_SHADER).write_text("void main() {}\n")
    with pytest.raises(ShaderError):
        Renderer().initialize()


def test_shutdown_leaves_renderer_unusable():
    renderer = Renderer()
    renderer.shutdown()
    with pytest.raises(RuntimeError):
        renderer.render(np.eye(4))