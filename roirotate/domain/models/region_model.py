# roirotate/domain/models/region_model.py
"""
Region (ROI) models.

A region is a tagged variant: `kind` decides how its geometry is stored and
how it is rotated. Point-set regions expose an ordered (N, 2) float vertex
array, composite regions carry a QPainterPath relative to their bounding box
origin, and image stamps carry a Pillow image with an intrinsic angle.
"""
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
from PIL import Image
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QPainterPath, QPolygonF, QTransform

Bounds = Tuple[float, float, float, float]  # (x, y, width, height)
Point = Tuple[float, float]


class RegionKind(Enum):
    """Representation kind of a region."""
    POLYGON = "polygon"
    FREEHAND = "freehand"
    TRACED = "traced"
    POLYLINE = "polyline"
    FREELINE = "freeline"
    RECTANGLE = "rectangle"
    OVAL = "oval"
    LINE = "line"
    POINT = "point"
    COMPOSITE = "composite"
    IMAGE_STAMP = "image-stamp"


# Kinds stored directly as a vertex list in a PolygonRegion
POLYGON_KINDS = frozenset({
    RegionKind.POLYGON,
    RegionKind.FREEHAND,
    RegionKind.TRACED,
    RegionKind.POLYLINE,
    RegionKind.FREELINE,
})

# Kinds rotated vertex by vertex and rebuilt as a PolygonRegion
POLYGON_LIKE_KINDS = POLYGON_KINDS | {RegionKind.RECTANGLE, RegionKind.OVAL}

ROUNDED_CORNER_SEGMENTS = 8


@dataclass
class StyleAttributes:
    """Non-geometric display attributes carried across every rotation."""
    name: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: float = 1.0
    fill_color: Optional[str] = None
    position: int = 0  # stack slice, 0 = all
    group: int = 0
    properties: Dict[str, str] = field(default_factory=dict)

    def copy(self) -> 'StyleAttributes':
        return replace(self, properties=dict(self.properties))


def as_point_array(points: Iterable[Sequence[float]]) -> np.ndarray:
    """Copy `points` into a float64 array of shape (N, 2)."""
    array = np.array(list(points), dtype=np.float64)
    if array.size == 0:
        return array.reshape(0, 2)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Expected a sequence of (x, y) pairs, got shape {array.shape}")
    return array


def bounds_of(points: np.ndarray) -> Bounds:
    """Axis-aligned bounding box of an (N, 2) array."""
    if len(points) == 0:
        return 0.0, 0.0, 0.0, 0.0
    mins = points.min(axis=0)
    maxs = points.max(axis=0)
    return float(mins[0]), float(mins[1]), float(maxs[0] - mins[0]), float(maxs[1] - mins[1])


class Region(ABC):
    """
    Base class for all region kinds.

    Attributes:
        style: Style attribute bundle
        rotation_center: Optional sticky (x, y) pivot for repeated rotations
    """

    kind: RegionKind

    def __init__(self, style: Optional[StyleAttributes] = None,
                 rotation_center: Optional[Point] = None):
        self.style = style.copy() if style is not None else StyleAttributes()
        self._rotation_center: Optional[Point] = None
        if rotation_center is not None:
            self.set_rotation_center(*rotation_center)

    @abstractmethod
    def get_bounds(self) -> Bounds:
        """Bounding box as (x, y, width, height)."""
        pass

    @abstractmethod
    def get_float_polygon(self) -> np.ndarray:
        """Fresh (N, 2) array of the region's outline vertices."""
        pass

    @abstractmethod
    def clone(self) -> 'Region':
        """Independent copy including style and sticky rotation center."""
        pass

    @property
    def rotation_center(self) -> Optional[Point]:
        """The sticky rotation center, or None when none is attached."""
        return self._rotation_center

    def set_rotation_center(self, x: float, y: float) -> None:
        self._rotation_center = (float(x), float(y))

    def get_rotation_center(self) -> Point:
        """
        The pivot this region rotates around by default.

        The sticky center when one is attached, otherwise the center of the
        bounding box.
        """
        if self._rotation_center is not None:
            return self._rotation_center
        x, y, width, height = self.get_bounds()
        return x + width / 2.0, y + height / 2.0

    def _copy_base_to(self, other: 'Region') -> 'Region':
        other.style = self.style.copy()
        other._rotation_center = self._rotation_center
        return other

    def __repr__(self) -> str:
        x, y, width, height = self.get_bounds()
        return f"{type(self).__name__}(kind={self.kind.value}, bounds=({x:g}, {y:g}, {width:g}, {height:g}))"


class PolygonRegion(Region):
    """Closed or open vertex sequence: polygon, freehand, traced, polyline, freeline."""

    def __init__(self, points: Iterable[Sequence[float]], kind: RegionKind = RegionKind.POLYGON,
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        if kind not in POLYGON_KINDS:
            raise ValueError(f"{kind} is not a polygon kind")
        super().__init__(style, rotation_center)
        self.kind = kind
        self._points = as_point_array(points)

    def get_bounds(self) -> Bounds:
        return bounds_of(self._points)

    def get_float_polygon(self) -> np.ndarray:
        return self._points.copy()

    def clone(self) -> 'PolygonRegion':
        return self._copy_base_to(PolygonRegion(self._points, self.kind))


class RectangleRegion(Region):
    """
    Axis-aligned rectangle, optionally with rounded corners.

    A rounded rectangle keeps the RECTANGLE kind but its outline is sampled
    with more than four vertices.
    """

    kind = RegionKind.RECTANGLE

    def __init__(self, x: float, y: float, width: float, height: float,
                 corner_diameter: float = 0.0,
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        super().__init__(style, rotation_center)
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.corner_diameter = float(corner_diameter)

    @property
    def is_rounded(self) -> bool:
        return self.corner_diameter > 0

    def get_bounds(self) -> Bounds:
        return self.x, self.y, self.width, self.height

    def get_float_polygon(self) -> np.ndarray:
        x, y, w, h = self.x, self.y, self.width, self.height
        if not self.is_rounded:
            return as_point_array([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])

        r = min(self.corner_diameter / 2.0, w / 2.0, h / 2.0)
        # corner arc centers, clockwise on screen from the top right
        corners = [
            (x + w - r, y + r, -90.0),
            (x + w - r, y + h - r, 0.0),
            (x + r, y + h - r, 90.0),
            (x + r, y + r, 180.0),
        ]
        points = []
        for cx, cy, start in corners:
            for i in range(ROUNDED_CORNER_SEGMENTS + 1):
                t = math.radians(start + 90.0 * i / ROUNDED_CORNER_SEGMENTS)
                points.append((cx + r * math.cos(t), cy + r * math.sin(t)))
        return as_point_array(points)

    def clone(self) -> 'RectangleRegion':
        return self._copy_base_to(
            RectangleRegion(self.x, self.y, self.width, self.height, self.corner_diameter))


class OvalRegion(Region):
    """Ellipse inscribed in its bounds, exposed as a sampled outline."""

    kind = RegionKind.OVAL

    def __init__(self, x: float, y: float, width: float, height: float,
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        super().__init__(style, rotation_center)
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    def segment_count(self) -> int:
        """Roughly one vertex per two pixels of perimeter (Ramanujan's approximation)."""
        a = self.width / 2.0
        b = self.height / 2.0
        perimeter = math.pi * (3 * (a + b) - math.sqrt(max((3 * a + b) * (a + 3 * b), 0.0)))
        return max(16, min(720, int(math.ceil(perimeter / 2.0))))

    def get_bounds(self) -> Bounds:
        return self.x, self.y, self.width, self.height

    def get_float_polygon(self) -> np.ndarray:
        a = self.width / 2.0
        b = self.height / 2.0
        t = np.linspace(0.0, 2.0 * math.pi, self.segment_count(), endpoint=False)
        return np.column_stack((self.x + a + a * np.cos(t), self.y + b + b * np.sin(t)))

    def clone(self) -> 'OvalRegion':
        return self._copy_base_to(OvalRegion(self.x, self.y, self.width, self.height))


class LineRegion(Region):
    """Straight line between two endpoints."""

    kind = RegionKind.LINE

    def __init__(self, x1: float, y1: float, x2: float, y2: float,
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        super().__init__(style, rotation_center)
        self.x1 = float(x1)
        self.y1 = float(y1)
        self.x2 = float(x2)
        self.y2 = float(y2)

    def endpoints(self) -> np.ndarray:
        return as_point_array([(self.x1, self.y1), (self.x2, self.y2)])

    def get_bounds(self) -> Bounds:
        return bounds_of(self.endpoints())

    def get_float_polygon(self) -> np.ndarray:
        """Endpoints for thin lines, the four-corner outline for wide ones."""
        half = self.style.stroke_width / 2.0
        length = math.hypot(self.x2 - self.x1, self.y2 - self.y1)
        if half <= 0.5 or length == 0:
            return self.endpoints()
        # unit normal scaled to half the stroke width
        nx = -(self.y2 - self.y1) / length * half
        ny = (self.x2 - self.x1) / length * half
        return as_point_array([
            (self.x1 + nx, self.y1 + ny),
            (self.x2 + nx, self.y2 + ny),
            (self.x2 - nx, self.y2 - ny),
            (self.x1 - nx, self.y1 - ny),
        ])

    def clone(self) -> 'LineRegion':
        return self._copy_base_to(LineRegion(self.x1, self.y1, self.x2, self.y2))


class PointRegion(Region):
    """One or more unconnected points."""

    kind = RegionKind.POINT

    def __init__(self, points: Iterable[Sequence[float]],
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        super().__init__(style, rotation_center)
        self._points = as_point_array(points)
        if len(self._points) == 0:
            raise ValueError("A point region needs at least one point")

    def get_bounds(self) -> Bounds:
        return bounds_of(self._points)

    def get_float_polygon(self) -> np.ndarray:
        return self._points.copy()

    def clone(self) -> 'PointRegion':
        return self._copy_base_to(PointRegion(self._points))


class CompositeRegion(Region):
    """
    Arbitrary outline, possibly with holes or several disjoint subpaths.

    The path is stored relative to the bounding box origin, so it cannot be
    addressed vertex by vertex; it is transformed as a whole.
    """

    kind = RegionKind.COMPOSITE

    def __init__(self, path: QPainterPath,
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        """
        Args:
            path: Outline in image coordinates
        """
        super().__init__(style, rotation_center)
        rect = path.boundingRect()
        self._origin = (rect.x(), rect.y())
        self._shape = path.translated(-rect.x(), -rect.y())

    @classmethod
    def from_polygons(cls, polygons: Iterable[Iterable[Sequence[float]]],
                      style: Optional[StyleAttributes] = None) -> 'CompositeRegion':
        """Build a composite from closed subpaths; overlapping subpaths become holes."""
        path = QPainterPath()
        path.setFillRule(Qt.FillRule.OddEvenFill)
        for polygon in polygons:
            path.addPolygon(QPolygonF([QPointF(x, y) for x, y in as_point_array(polygon)]))
            path.closeSubpath()
        return cls(path, style)

    @property
    def origin(self) -> Point:
        return self._origin

    def get_shape(self) -> QPainterPath:
        """Copy of the outline relative to the bounds origin."""
        return QPainterPath(self._shape)

    def subpath_polygons(self) -> list:
        """Each flattened subpath as an (N, 2) array in image coordinates."""
        transform = QTransform.fromTranslate(self._origin[0], self._origin[1])
        polygons = []
        for polygon in self._shape.toSubpathPolygons(transform):
            polygons.append(as_point_array(
                (point.x(), point.y()) for point in polygon))
        return polygons

    def contains(self, x: float, y: float) -> bool:
        return self._shape.contains(QPointF(x - self._origin[0], y - self._origin[1]))

    def get_bounds(self) -> Bounds:
        rect = self._shape.boundingRect()
        return self._origin[0], self._origin[1], rect.width(), rect.height()

    def get_float_polygon(self) -> np.ndarray:
        polygons = self.subpath_polygons()
        if not polygons:
            return as_point_array([])
        return np.concatenate(polygons)

    def clone(self) -> 'CompositeRegion':
        path = self._shape.translated(self._origin[0], self._origin[1])
        return self._copy_base_to(CompositeRegion(path))


class ImageStampRegion(Region):
    """
    Raster overlay anchored at (x, y).

    Rotation is intrinsic: the stamp keeps its source image and a cumulative
    angle, and re-renders itself about its own center.
    """

    kind = RegionKind.IMAGE_STAMP

    def __init__(self, image: Image.Image, x: float, y: float,
                 style: Optional[StyleAttributes] = None, rotation_center: Optional[Point] = None):
        super().__init__(style, rotation_center)
        self.x = float(x)
        self.y = float(y)
        self._source = image.copy()
        self.image = image.copy()
        self.angle = 0.0

    def rotate_in_place(self, angle: float) -> None:
        """Add `angle` degrees (clockwise positive) to the stamp's rotation."""
        if angle == 0:
            return
        self.angle += angle
        # Pillow rotates counter-clockwise
        self.image = self._source.rotate(-self.angle, resample=Image.Resampling.BILINEAR)

    def get_bounds(self) -> Bounds:
        return self.x, self.y, float(self.image.width), float(self.image.height)

    def get_float_polygon(self) -> np.ndarray:
        x, y, w, h = self.get_bounds()
        return as_point_array([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])

    def clone(self) -> 'ImageStampRegion':
        stamp = ImageStampRegion(self._source, self.x, self.y)
        stamp.image = self.image.copy()
        stamp.angle = self.angle
        return self._copy_base_to(stamp)


def copy_attributes(source: Region, destination: Region) -> None:
    """Make `destination`'s style bundle equal to (an independent copy of) `source`'s."""
    destination.style = source.style.copy()
