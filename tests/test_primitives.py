import numpy as np
import pytest

from gearsengine.primitives import cube_vertices, quad_vertices, sphere_mesh


def test_cube_layout():
    cube = cube_vertices()
    assert cube.shape == (36, 8)
    assert cube.dtype == np.float32
    assert np.allclose(np.abs(cube[:, :3]), 1.0)


def test_cube_normals_are_unit_axes_and_match_face():
    cube = cube_vertices()
    normals = cube[:, 3:6]
    assert np.allclose(np.linalg.norm(normals, axis=1), 1.0)
    for vertex in cube:
        axis = int(np.argmax(np.abs(vertex[3:6])))
        assert vertex[axis] == vertex[3 + axis]


def test_cube_uvs_in_unit_range():
    uv = cube_vertices()[:, 6:]
    assert uv.min() >= 0.0 and uv.max() <= 1.0


def test_quad_layout():
    quad = quad_vertices()
    assert quad.shape == (4, 5)
    assert np.allclose(quad[:, 2], 0.0)
    assert np.allclose(quad[0], (-1.0, 1.0, 0.0, 0.0, 1.0))


def test_sphere_counts():
    mesh = sphere_mesh()
    assert len(mesh.positions) == 65 * 65
    assert mesh.index_count == 2 * 65 * 64
    assert int(mesh.indices.max()) < len(mesh.positions)


def test_sphere_points_on_unit_sphere():
    mesh = sphere_mesh(8, 6)
    assert np.allclose(np.linalg.norm(mesh.positions, axis=1), 1.0)
    assert np.allclose(mesh.normals, mesh.positions)


def test_sphere_strip_order_alternates():
    mesh = sphere_mesh(2, 2)
    row = 3
    assert list(mesh.indices[:2]) == [0, row]
    second_row = mesh.indices[2 * row :]
    assert list(second_row[:2]) == [2 * row + 2, row + 2]


def test_sphere_interleaved_data():
    mesh = sphere_mesh(4, 4)
    data = mesh.data
    assert data.shape == (len(mesh.positions), 8)
    assert data.dtype == np.float32
    assert np.allclose(data[:, :3], mesh.positions, atol=1e-6)
    assert np.allclose(data[:, 3:5], mesh.uvs, atol=1e-6)
    assert np.allclose(data[:, 5:], mesh.normals, atol=1e-6)


def test_sphere_poles():
    mesh = sphere_mesh(4, 4)
    assert np.allclose(mesh.positions[0], (0.0, 1.0, 0.0), atol=1e-12)
    assert np.allclose(mesh.positions[-1][1], -1.0)


@pytest.mark.parametrize("xs, ys", [(0, 4), (4, 0), (-1, 2)])
def test_sphere_rejects_bad_segments(xs, ys):
    with pytest.raises(ValueError):
        sphere_mesh(xs, ys)