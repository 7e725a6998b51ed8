import math

import pytest

from tracekit.camera import MouseAction, OrbitCamera


def _distance(a, b):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def test_reset_defaults():
    cam = OrbitCamera()
    assert cam.elevation == pytest.approx(0.2)
    assert cam.azimuth == pytest.approx(math.pi)
    assert cam.dolly == pytest.approx(-20.0)
    assert cam.look_at == (0.0, 0.0, 0.0)
    assert cam.current_action is MouseAction.NONE


def test_eye_lies_at_dolly_distance():
    cam = OrbitCamera()
    eye, center, up = cam.viewing_parameters()
    assert _distance(eye, center) == pytest.approx(20.0)
    assert up == (0.0, 1.0, 0.0)
    assert eye[0] == pytest.approx(0.0, abs=1e-9)


def test_up_flips_when_upside_down():
    cam = OrbitCamera()
    cam.elevation = math.pi
    assert cam.viewing_parameters().up == (0.0, -1.0, 0.0)


def test_negative_elevation_wraps():
    cam = OrbitCamera()
    cam.elevation = -0.5
    assert cam.elevation == pytest.approx(6.28318530717 - 0.5)
    assert cam.viewing_parameters().up == (0.0, 1.0, 0.0)


def test_rotate_drag():
    cam = OrbitCamera()
    cam.click_mouse(MouseAction.ROTATE, 0, 0)
    cam.drag_mouse(90, 45)
    assert cam.azimuth == pytest.approx(math.pi - 1.0)
    assert cam.elevation == pytest.approx(0.7)
    eye, center, _ = cam.viewing_parameters()
    assert _distance(eye, center) == pytest.approx(20.0)


def test_zoom_drag():
    cam = OrbitCamera()
    cam.click_mouse(MouseAction.ZOOM, 5, 5)
    cam.drag_mouse(5, 15)
    assert cam.dolly == pytest.approx(-20.0 - 10 * 0.08)


def test_translate_moves_look_at_sideways():
    cam = OrbitCamera()
    eye0, center0, _ = cam.viewing_parameters()
    view_dir = [e - c for e, c in zip(eye0, center0)]
    cam.click_mouse(MouseAction.TRANSLATE, 0, 0)
    cam.drag_mouse(10, 20)
    eye, center, _ = cam.viewing_parameters()
    shift = [a - b for a, b in zip(center, center0)]
    assert _distance(center, center0) > 0.0
    assert sum(a * b for a, b in zip(shift, view_dir)) == pytest.approx(0.0, abs=1e-9)
    assert _distance(eye, center) == pytest.approx(20.0)


def test_release_stops_dragging():
    cam = OrbitCamera()
    cam.click_mouse(MouseAction.ROTATE, 0, 0)
    cam.release_mouse(0, 0)
    cam.drag_mouse(50, 50)
    assert cam.azimuth == pytest.approx(math.pi)
    assert cam.elevation == pytest.approx(0.2)
    assert cam.current_action is MouseAction.NONE


def test_twist_drag_changes_nothing():
    cam = OrbitCamera()
    before = cam.viewing_parameters()
    cam.click_mouse(MouseAction.TWIST, 0, 0)
    cam.drag_mouse(30, 30)
    assert cam.viewing_parameters() == before


def test_setting_look_at_moves_eye_with_it():
    cam = OrbitCamera()
    eye0, _, _ = cam.viewing_parameters()
    cam.look_at = (1.0, 2.0, 3.0)
    eye, center, _ = cam.viewing_parameters()
    assert center == (1.0, 2.0, 3.0)
    assert eye == pytest.approx((eye0[0] + 1.0, eye0[1] + 2.0, eye0[2] + 3.0))


def test_reset_after_changes():
    cam = OrbitCamera()
    first = cam.viewing_parameters()
    cam.dolly = -5.0
    cam.azimuth = 0.3
    cam.reset()
    assert cam.viewing_parameters() == first