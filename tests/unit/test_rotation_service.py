# tests/unit/test_rotation_service.py
import math

import numpy as np
import pytest
from PIL import Image

from roirotate.domain.common.errors import ErrorCategory, RegionKindError
from roirotate.domain.models.region_model import (
    ImageStampRegion,
    LineRegion,
    RectangleRegion,
    RegionKind,
)
from roirotate.infrastructure.rotation.rotation_service import RotationService


@pytest.fixture
def service(logger):
    return RotationService(logger)


def test_rotate_returns_new_region(service):
    rect = RectangleRegion(0, 0, 10, 10)

    result = service.rotate(rect, 90, 5, 5)

    assert result.is_success
    assert result.value.kind is RegionKind.POLYGON
    np.testing.assert_allclose(result.value.get_float_polygon()[0], (10, 0), atol=1e-9)


@pytest.mark.parametrize("angle, center", [
    (math.nan, (0, 0)),
    (math.inf, (0, 0)),
    (10, (math.nan, 0)),
    (10, (0, -math.inf)),
    ("ten", (0, 0)),
])
def test_rotate_rejects_non_finite_input(service, angle, center):
    result = service.rotate(LineRegion(0, 0, 1, 1), angle, *center)

    assert result.is_failure
    assert result.error.category is ErrorCategory.VALIDATION


def test_rotate_rejects_missing_region(service):
    assert service.rotate(None, 10, 0, 0).is_failure
    assert service.rotate_about_anchor(None, 10).is_failure
    assert service.resolve_center(None, False, 10, 10).is_failure


def test_image_stamp_result_is_none(service):
    stamp = ImageStampRegion(Image.new("L", (4, 4)), 0, 0)

    result = service.rotate(stamp, 12, 0, 0)

    assert result.is_success
    assert result.value is None
    assert stamp.angle == 12


def test_unknown_kind_propagates(service, mystery_region):
    with pytest.raises(RegionKindError):
        service.rotate(mystery_region, 5, 0, 0)


def test_rotate_about_anchor_sets_center(service):
    result = service.rotate_about_anchor(RectangleRegion(0, 0, 4, 2), 45)

    assert result.is_success
    assert result.value.rotation_center == (2.0, 1.0)


def test_resolve_center(service):
    rect = RectangleRegion(0, 0, 4, 2)

    assert service.resolve_center(rect, False, 100, 50).value == (2.0, 1.0)
    assert service.resolve_center(rect, True, 100, 50).value == (50.0, 25.0)
    assert service.resolve_center(rect, True, math.nan, 50).is_failure
