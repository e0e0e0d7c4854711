import pytest

from blockcraft.shader import Shader, ShaderError


def test_missing_vertex_file(tmp_path):
    fragment = tmp_path / "block.frag"
    fragment.write_text("void main() {}\n")
    with pytest.raises(FileNotFoundError):
        Shader(tmp_path / "missing.vert", fragment)


def test_missing_fragment_file(tmp_path):
    vertex = tmp_path / "block.vert"
    vertex.write_text("void main() {}\n")
    with pytest.raises(FileNotFoundError):
        Shader(vertex, tmp_path / "missing.frag")


def test_empty_vertex_source(tmp_path):
    vertex = tmp_path / "block.vert"
    vertex.write_text("")
    fragment = tmp_path / "block.frag"
    fragment.write_text("void main() {}\n")
    with pytest.raises(ShaderError) as excinfo:
        Shader(vertex, fragment)
    assert str(vertex) in str(excinfo.value)


def test_empty_fragment_source(tmp_path):
    vertex = tmp_path / "block.vert"
    vertex.write_text("void main() {}\n")
    fragment = tmp_path / "block.frag"
    fragment.write_text("")
    with pytest.raises(ShaderError) as excinfo:
        Shader(vertex, fragment)
    assert str(fragment) in str(excinfo.value)