import numpy as np
import pytest

from utils.lightmap_unwrap import XatlasUnwrapper

from conftest import make_box_mesh

pytest.importorskip("xatlas")


def test_unwrap_all_surfaces_into_one_atlas():
    mesh = make_box_mesh(surfaces=2)
    materials = [surface.material for surface in mesh.surfaces]

    XatlasUnwrapper(max_resolution=0).unwrap(mesh, np.eye(4), texel_size=0.1)

    assert mesh.lightmap_size_hint is not None
    assert all(size > 0 for size in mesh.lightmap_size_hint)
    for surface, material in zip(mesh.surfaces, materials):
        uv = surface.lightmap_uv
        assert uv.shape == (len(surface.geometry.vertices), 2)
        assert uv.min() >= 0.0 and uv.max() <= 1.0
        assert len(surface.geometry.faces) == 12
        assert surface.material is material


def test_texel_density_follows_node_scale():
    small, large = make_box_mesh(), make_box_mesh()
    unwrapper = XatlasUnwrapper(max_resolution=0)

    unwrapper.unwrap(small, np.eye(4), texel_size=0.1)
    unwrapper.unwrap(large, np.diag([4.0, 4.0, 4.0, 1.0]), texel_size=0.1)

    assert large.lightmap_size_hint[0] > small.lightmap_size_hint[0]


def test_invalid_texel_size():
    with pytest.raises(ValueError):
        XatlasUnwrapper().unwrap(make_box_mesh(), np.eye(4), texel_size=0)
