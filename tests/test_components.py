import pytest

from glsim.components import (
    CameraComponent,
    CameraProjection,
    MeshComponent,
    OrthographicCamera,
    PerspectiveCamera,
    PrimitiveType,
)
from glsim.linalg import Mat4, Vec4f
from glsim.transform import Transform


def test_enum_values_follow_declaration_order():
    assert [PrimitiveType(i) for i in range(3)] == [
        PrimitiveType.CUBE,
        PrimitiveType.PLANE,
        PrimitiveType.SPHERE,
    ]
    assert CameraProjection(0) is CameraProjection.ORTHOGRAPHIC
    assert CameraProjection(1) is CameraProjection.PERSPECTIVE


def test_camera_component_defaults():
    cc = CameraComponent()
    assert cc.projection is CameraProjection.PERSPECTIVE
    assert cc.enabled is True
    assert cc.persp.fov == 45.0
    assert cc.persp.near_clip == 0.01
    assert cc.persp.far_clip == 10000.0
    assert cc.ortho.near_clip == -1.0
    assert cc.ortho.far_clip == 1.0
    assert cc.ortho.zoom_level == 1.0


def test_camera_components_do_not_share_cameras():
    a = CameraComponent()
    b = CameraComponent()
    a.persp.fov = 90.0
    assert b.persp.fov == 45.0


def test_mesh_component_default_type():
    assert MeshComponent().type is PrimitiveType.CUBE


def test_ortho_view_of_default_transform_is_identity():
    assert OrthographicCamera().get_view_matrix(Transform()) == Mat4.identity()


def test_ortho_view_inverts_model_matrix():
    t = Transform()
    t.translate(t.position.one())
    view = OrthographicCamera().get_view_matrix(t)
    assert tuple(view @ t.position) == pytest.approx((0.0, 0.0, 0.0))


def test_perspective_view_of_default_transform_is_identity():
    view = PerspectiveCamera().get_view_matrix(Transform())
    for row, expected in zip(view, Mat4.identity()):
        assert row == pytest.approx(expected)


def test_ortho_projection_flips_y():
    proj = OrthographicCamera().get_projection_matrix()
    assert (proj @ Vec4f(0.0, 0.5, 0.0, 1.0)).y < 0.0
    assert (proj @ Vec4f(0.5, 0.0, 0.0, 1.0)).x > 0.0


def test_ortho_zoom_widens_view():
    near = OrthographicCamera().get_projection_matrix()
    far = OrthographicCamera(zoom_level=2.0).get_projection_matrix()
    assert far[0][0] == pytest.approx(near[0][0] / 2)
    assert far[1][1] == pytest.approx(near[1][1] / 2)


def test_perspective_projection_flips_y_and_scales_x_by_aspect():
    square = PerspectiveCamera().get_projection_matrix()
    wide = PerspectiveCamera(aspect_ratio=2.0).get_projection_matrix()
    assert (square @ Vec4f(0.0, 1.0, -5.0, 1.0)).y < 0.0
    assert wide[0][0] == pytest.approx(square[0][0] / 2)
    assert wide[1][1] == pytest.approx(square[1][1])


def test_perspective_depth_spans_zero_to_one():
    cam = PerspectiveCamera()
    proj = cam.get_projection_matrix()
    near = proj @ Vec4f(0.0, 0.0, -cam.near_clip, 1.0)
    far = proj @ Vec4f(0.0, 0.0, -cam.far_clip, 1.0)
    assert near.z / near.w == pytest.approx(0.0, abs=1e-9)
    assert far.z / far.w == pytest.approx(1.0)