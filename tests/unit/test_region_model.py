# tests/unit/test_region_model.py
import numpy as np
import pytest
from PIL import Image

from roirotate.domain.models.region_model import (
    CompositeRegion,
    ImageStampRegion,
    LineRegion,
    OvalRegion,
    PointRegion,
    PolygonRegion,
    RectangleRegion,
    RegionKind,
    copy_attributes,
)


def test_rectangle_outline_runs_clockwise_from_top_left():
    rect = RectangleRegion(2, 3, 4, 5)

    np.testing.assert_array_equal(rect.get_float_polygon(), [(2, 3), (6, 3), (6, 8), (2, 8)])
    assert not rect.is_rounded


def test_rounded_rectangle_outline_stays_inside_bounds():
    rect = RectangleRegion(0, 0, 20, 10, corner_diameter=6)

    outline = rect.get_float_polygon()

    assert len(outline) > 4
    assert outline[:, 0].min() == pytest.approx(0)
    assert outline[:, 0].max() == pytest.approx(20)
    assert outline[:, 1].min() == pytest.approx(0)
    assert outline[:, 1].max() == pytest.approx(10)


def test_oval_outline_lies_on_the_ellipse():
    oval = OvalRegion(10, 20, 40, 10)

    outline = oval.get_float_polygon()

    u = (outline[:, 0] - 30) / 20
    v = (outline[:, 1] - 25) / 5
    np.testing.assert_allclose(u * u + v * v, 1.0)
    assert len(outline) == oval.segment_count()


def test_default_rotation_center_is_bounds_center():
    polygon = PolygonRegion([(0, 0), (10, 2), (4, 8)])

    assert polygon.get_rotation_center() == (5.0, 4.0)


def test_sticky_rotation_center_overrides_bounds_center():
    line = LineRegion(0, 0, 10, 0)

    assert line.rotation_center is None
    assert line.get_rotation_center() == (5.0, 0.0)

    line.set_rotation_center(1, 2)
    assert line.get_rotation_center() == (1.0, 2.0)
    assert line.clone().rotation_center == (1.0, 2.0)


def test_float_polygon_is_a_copy():
    points = PointRegion([(1, 2), (3, 4)])

    outline = points.get_float_polygon()
    outline[0] = (100, 100)

    np.testing.assert_array_equal(points.get_float_polygon(), [(1, 2), (3, 4)])


def test_polygon_region_rejects_non_polygon_kinds():
    with pytest.raises(ValueError):
        PolygonRegion([(0, 0), (1, 1)], RegionKind.LINE)


def test_point_region_needs_a_point():
    with pytest.raises(ValueError):
        PointRegion([])


def test_malformed_points_are_rejected():
    with pytest.raises(ValueError):
        PolygonRegion([(0, 0, 0), (1, 1, 1)])


def test_clone_is_independent(style):
    polygon = PolygonRegion([(0, 0), (4, 0), (4, 4)], RegionKind.TRACED, style=style,
                            rotation_center=(2, 2))

    copy = polygon.clone()
    copy.style.properties["label"] = "changed"
    copy.set_rotation_center(0, 0)

    assert copy.kind is RegionKind.TRACED
    assert polygon.style.properties["label"] == "nucleus"
    assert polygon.rotation_center == (2.0, 2.0)
    np.testing.assert_array_equal(copy.get_float_polygon(), polygon.get_float_polygon())


def test_copy_attributes_makes_equal_independent_bundle(style):
    source = RectangleRegion(0, 0, 1, 1, style=style)
    destination = OvalRegion(0, 0, 1, 1)

    copy_attributes(source, destination)

    assert destination.style == source.style
    destination.style.properties["extra"] = "x"
    assert "extra" not in source.style.properties


def test_composite_keeps_outline_relative_to_its_origin():
    composite = CompositeRegion.from_polygons([
        [(5, 5), (25, 5), (25, 15), (5, 15)],
        [(10, 8), (14, 8), (14, 12), (10, 12)],
    ])

    assert composite.get_bounds() == pytest.approx((5, 5, 20, 10))
    assert composite.origin == pytest.approx((5, 5))
    assert composite.get_shape().boundingRect().x() == pytest.approx(0)
    assert len(composite.subpath_polygons()) == 2
    assert composite.contains(7, 7)
    assert not composite.contains(12, 10)
    assert not composite.contains(30, 10)


def test_composite_clone_keeps_position():
    composite = CompositeRegion.from_polygons([[(1, 2), (6, 2), (6, 9)]])

    assert composite.clone().get_bounds() == pytest.approx(composite.get_bounds())


def test_image_stamp_bounds_and_clone():
    stamp = ImageStampRegion(Image.new("L", (16, 12)), 3, 4)
    stamp.rotate_in_place(90)

    copy = stamp.clone()
    copy.rotate_in_place(10)

    assert stamp.get_bounds() == (3, 4, 16, 12)
    assert stamp.get_rotation_center() == (11.0, 10.0)
    assert stamp.angle == 90
    assert copy.angle == 100


def test_zero_angle_leaves_stamp_image_untouched():
    source = Image.new("L", (4, 4), 7)
    stamp = ImageStampRegion(source, 0, 0)
    image_before = stamp.image

    stamp.rotate_in_place(0)

    assert stamp.image is image_before
    assert stamp.angle == 0
