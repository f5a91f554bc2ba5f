import numpy as np
import pytest

from bwxsdk.mesh import Mesh, MeshFormat, Vertex


def test_plain_positions_from_table():
    mesh = Mesh(MeshFormat.NONE)
    mesh.vertices_from_table([1, 2, 3, 4, 5, 6])
    assert [v.position for v in mesh.vertices] == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]
    assert mesh.vertices[0].normal == (0.0, 0.0, 0.0)


def test_normals_are_read_after_position():
    mesh = Mesh(MeshFormat.NORMAL)
    mesh.vertices_from_table([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12])
    assert len(mesh.vertices) == 2
    assert mesh.vertices[0].normal == (4.0, 5.0, 6.0)
    assert mesh.vertices[1].position == (7.0, 8.0, 9.0)


def test_tangent_takes_three_distinct_values():
    mesh = Mesh(MeshFormat.TANGENT)
    mesh.vertices_from_table([0, 0, 0, 7, 8, 9])
    assert mesh.vertices[0].tangent == (7.0, 8.0, 9.0)


def test_uv_is_parsed_but_not_in_buffer():
    mesh = Mesh(MeshFormat.UV)
    mesh.vertices_from_table([1, 2, 3, 4, 5, 6])
    assert mesh.vertices[0].uv == (4.0, 5.0, 6.0)
    assert mesh.stride() == 3
    assert mesh.interleaved_data().tolist() == [1.0, 2.0, 3.0]


def test_table_length_must_fit_style():
    mesh = Mesh(MeshFormat.NORMAL)
    with pytest.raises(ValueError):
        mesh.vertices_from_table([1, 2, 3, 4, 5])


def test_interleaved_round_trip():
    style = MeshFormat.NORMAL | MeshFormat.TEX_COORD | MeshFormat.COLOR
    table = [float(i) for i in range(22)]
    mesh = Mesh(style)
    mesh.vertices_from_table(table)
    data = mesh.interleaved_data()
    assert data.dtype == np.float32
    assert data.tolist() == table
    assert data.size == mesh.stride() * len(mesh.vertices)


def test_attribute_layout_offsets_are_contiguous():
    mesh = Mesh(MeshFormat.NORMAL | MeshFormat.TEX_COORD | MeshFormat.TANGENT
                | MeshFormat.BITANGENT | MeshFormat.COLOR)
    layout = mesh.attribute_layout()
    assert [loc for loc, _, _ in layout] == [0, 1, 2, 3, 4, 5]
    for (_, size, offset), (_, _, next_offset) in zip(layout, layout[1:]):
        assert offset + size == next_offset
    last_loc, last_size, last_offset = layout[-1]
    assert last_offset + last_size == mesh.stride()


def test_indices_from_table_converts_to_int():
    mesh = Mesh(MeshFormat.INDICES)
    mesh.indices_from_table([0.0, 1.0, 2.0])
    assert mesh.indices == [0, 1, 2]


def test_element_count_depends_on_indices_flag():
    indexed = Mesh(MeshFormat.INDICES)
    indexed.vertices = [Vertex(), Vertex(), Vertex(), Vertex()]
    indexed.indices_from_table([0, 1, 2, 2, 3, 0])
    assert indexed.element_count == len(indexed.indices)
    plain = Mesh(MeshFormat.NONE)
    plain.vertices = [Vertex(), Vertex(), Vertex()]
    plain.indices = [0, 1]
    assert plain.element_count == len(plain.vertices)


def test_clear_empties_mesh():
    mesh = Mesh(MeshFormat.NONE)
    mesh.vertices_from_table([1, 2, 3])
    mesh.indices_from_table([0])
    mesh.clear()
    assert mesh.vertices == []
    assert mesh.indices == []


def test_new_table_replaces_vertices():
    mesh = Mesh(MeshFormat.NONE)
    mesh.vertices_from_table([1, 2, 3, 4, 5, 6])
    mesh.vertices_from_table([7, 8, 9])
    assert [v.position for v in mesh.vertices] == [(7.0, 8.0, 9.0)]