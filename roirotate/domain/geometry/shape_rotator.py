# roirotate/domain/geometry/shape_rotator.py
"""
Rotation of regions around a pivot point.

Angles are in degrees and positive angles turn clockwise on screen, where y
grows downward. Each RegionKind maps to exactly one strategy in _STRATEGIES:
point-set kinds are rotated vertex by vertex, composite outlines through a
QTransform, and image stamps rotate themselves in place.

Rotation never mutates its input, except for image stamps whose rotation is
intrinsic metadata.
"""
import math
from typing import Callable, Dict, Optional

import numpy as np
from PySide6.QtGui import QTransform

from roirotate.domain.common.errors import RegionKindError
from roirotate.domain.geometry.center_resolver import resolve_center
from roirotate.domain.models.region_model import (
    CompositeRegion,
    LineRegion,
    POLYGON_LIKE_KINDS,
    PointRegion,
    PolygonRegion,
    Region,
    RegionKind,
    copy_attributes,
)

RotationStrategy = Callable[[Region, float, float, float], Optional[Region]]


def rotate_points(points: np.ndarray, angle: float, xcenter: float, ycenter: float) -> np.ndarray:
    """
    Rotate an (N, 2) array of screen coordinates about (xcenter, ycenter).

    Works in polar form with y flipped to the mathematical orientation, so a
    positive `angle` is clockwise on screen. A point on the center stays put.
    """
    points = np.asarray(points, dtype=np.float64)
    theta = -angle * math.pi / 180.0
    dx = points[:, 0] - xcenter
    dy = ycenter - points[:, 1]
    radius = np.sqrt(dx * dx + dy * dy)
    a = np.arctan2(dy, dx)

    rotated = np.empty_like(points)
    rotated[:, 0] = xcenter + radius * np.cos(a + theta)
    rotated[:, 1] = ycenter - radius * np.sin(a + theta)
    return rotated


def composite_transform(angle: float, xcenter: float, ycenter: float,
                        origin_x: float, origin_y: float) -> QTransform:
    """
    Transform taking a composite's local outline to its rotated image position.

    The local outline is first moved to its bounds origin, then rotated about
    the center. QTransform products apply left to right.
    """
    rotation = QTransform()
    rotation.rotate(angle)
    return (QTransform.fromTranslate(origin_x, origin_y)
            * QTransform.fromTranslate(-xcenter, -ycenter)
            * rotation
            * QTransform.fromTranslate(xcenter, ycenter))


def promoted_kind(kind: RegionKind, vertex_count: int) -> RegionKind:
    """Kind of the polygon built from a rotated polygon-like region."""
    if kind is RegionKind.RECTANGLE:
        # a rounded rectangle samples its corners into many vertices
        return RegionKind.FREEHAND if vertex_count > 4 else RegionKind.POLYGON
    if kind in (RegionKind.OVAL, RegionKind.TRACED):
        return RegionKind.FREEHAND
    return kind


def _rotate_image_stamp(region, angle, xcenter, ycenter):
    region.rotate_in_place(angle)
    return None


def _rotate_composite(region, angle, xcenter, ycenter):
    origin_x, origin_y = region.origin
    transform = composite_transform(angle, xcenter, ycenter, origin_x, origin_y)
    return CompositeRegion(transform.map(region.get_shape()))


def _rotate_line(region, angle, xcenter, ycenter):
    (x1, y1), (x2, y2) = rotate_points(region.endpoints(), angle, xcenter, ycenter)
    return LineRegion(x1, y1, x2, y2)


def _rotate_point_set(region, angle, xcenter, ycenter):
    return PointRegion(rotate_points(region.get_float_polygon(), angle, xcenter, ycenter))


def _rotate_polygon(region, angle, xcenter, ycenter):
    polygon = region.get_float_polygon()
    kind = promoted_kind(region.kind, len(polygon))
    return PolygonRegion(rotate_points(polygon, angle, xcenter, ycenter), kind)


_STRATEGIES: Dict[RegionKind, RotationStrategy] = {
    RegionKind.IMAGE_STAMP: _rotate_image_stamp,
    RegionKind.COMPOSITE: _rotate_composite,
    RegionKind.LINE: _rotate_line,
    RegionKind.POINT: _rotate_point_set,
}
_STRATEGIES.update({kind: _rotate_polygon for kind in POLYGON_LIKE_KINDS})

_missing = set(RegionKind) - set(_STRATEGIES)
if _missing:
    raise RegionKindError(_missing, f"Rotation strategies missing for {sorted(k.value for k in _missing)}")


def rotate(region: Region, angle: float, xcenter: float, ycenter: float) -> Optional[Region]:
    """
    Rotate `region` by `angle` degrees about (xcenter, ycenter).

    Args:
        region: Region to rotate; left untouched unless it is an image stamp
        angle: Degrees, clockwise positive
        xcenter: Pivot x
        ycenter: Pivot y

    Returns:
        A new region carrying the source's style attributes, or None when the
        region was an image stamp that rotated itself in place about its own
        center and there is no replacement to install.

    Raises:
        RegionKindError: If the region's kind has no rotation strategy
    """
    strategy = _STRATEGIES.get(region.kind)
    if strategy is None:
        raise RegionKindError(region.kind)

    rotated = strategy(region, angle, xcenter, ycenter)
    if rotated is not None:
        copy_attributes(region, rotated)
    return rotated


def rotate_about_anchor(region: Region, angle: float) -> Region:
    """
    Rotate `region` about its own rotation center.

    The center is attached to the result as its sticky rotation center, so
    repeated calls keep pivoting on the same point. An image stamp is rotated
    in place and returned as is.
    """
    if region.kind is RegionKind.IMAGE_STAMP:
        region.rotate_in_place(angle)
        return region

    xcenter, ycenter = resolve_center(region, use_image_center=False, image_width=0.0, image_height=0.0)
    rotated = rotate(region, angle, xcenter, ycenter)
    rotated.set_rotation_center(xcenter, ycenter)
    return rotated
