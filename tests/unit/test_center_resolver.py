# tests/unit/test_center_resolver.py
from roirotate.domain.geometry.center_resolver import resolve_center
from roirotate.domain.models.region_model import PointRegion, RectangleRegion


def test_image_center_ignores_region_shape():
    rect = RectangleRegion(100, 100, 4, 4, rotation_center=(1, 1))

    assert resolve_center(rect, True, 640, 481) == (320.0, 240.5)


def test_own_center_is_single_bounds_center_not_vertex_average():
    # vertex mean would be (1, 1); bounds center is (1.5, 1.5)
    points = PointRegion([(0, 0), (0, 0), (3, 3)])

    assert resolve_center(points, False, 640, 480) == (1.5, 1.5)


def test_own_center_prefers_sticky_center():
    rect = RectangleRegion(0, 0, 10, 10, rotation_center=(2, 3))

    assert resolve_center(rect, False, 640, 480) == (2.0, 3.0)
