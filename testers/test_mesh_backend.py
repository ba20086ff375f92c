# -*- coding: utf-8 -*-
import numpy as np

from objviewer.math import Mat4, Vec3, Vec4
from objviewer.mesh import load_model
from objviewer.scene import FpsCamera, Mesh, Scene, Transform


def test_mesh_draw_uploads_once(triangle_obj, backend):
    mesh = Mesh(load_model(triangle_obj))
    mesh.draw(backend)
    mesh.draw(backend)

    assert backend.names() == [
        "create_buffer", "set_vertex_buffers", "draw",
        "set_vertex_buffers", "draw",
    ]
    _, (data, usage), _ = backend.calls[0]
    assert usage == "vertex"
    assert len(data) == 3 * 3 * 4
    assert backend.calls[2][1] == (3,)


def test_interleaved_layout(textured_obj):
    mesh = Mesh(load_model(textured_obj))
    assert mesh.components == 8
    assert mesh.stride == 32
    data = mesh.interleaved().reshape(-1, 8)
    assert data.shape == (6, 8)
    # позиция, нормаль, texcoord
    assert data[1].tolist() == [1, -1, 0, 0, 0, 1, 1, 0]


def test_positions_only_stride(quad_obj):
    mesh = Mesh(load_model(quad_obj))
    assert mesh.stride == 12
    assert mesh.interleaved().shape == (18,)


def test_bounding_sphere_follows_transform(quad_obj):
    mesh = Mesh(load_model(quad_obj),
                transform=Transform(position=Vec3(10, 0, 0), scale=Vec3(2, 2, 2)))
    centre, radius = mesh.bounding_sphere
    local_centre = mesh.model.positions.mean(axis=0)
    assert np.allclose(centre, local_centre * 2 + [10, 0, 0])
    assert radius > 0


def test_scene_frame_constants(triangle_obj):
    scene = Scene()
    mesh = scene.add(Mesh(load_model(triangle_obj),
                          transform=Transform(scale=Vec3(1, 2, 1)),
                          color=Vec4(0.0, 0.9, 0.1, 1.0)))
    cam = FpsCamera(position=Vec3(0, 0, 3))

    (consts,) = scene.frame_constants(cam, 1280, 720)
    expected = cam.projection_matrix(1280, 720) @ cam.view_matrix() @ mesh.transform.model_matrix()
    assert consts.xform.allclose(expected)
    assert consts.normal.allclose(Mat4.scale(1, 0.5, 1))
    assert consts.color is mesh.color


def test_scene_draw_and_remove(triangle_obj, backend):
    scene = Scene()
    a = scene.add(Mesh(load_model(triangle_obj), name="a"))
    scene.add(Mesh(load_model(triangle_obj), name="b"))
    scene.draw(backend)
    assert backend.names().count("draw") == 2
    scene.remove(a)
    assert [m.name for m in scene] == ["b"]
    assert len(scene) == 1
