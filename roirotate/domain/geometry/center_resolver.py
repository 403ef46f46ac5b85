# roirotate/domain/geometry/center_resolver.py
from typing import Tuple

from roirotate.domain.models.region_model import Region


def resolve_center(region: Region, use_image_center: bool,
                   image_width: float, image_height: float) -> Tuple[float, float]:
    """
    Pick the pivot for rotating `region`.

    Args:
        region: Region to rotate
        use_image_center: Rotate around the middle of the image instead of the region
        image_width: Width of the image the region belongs to
        image_height: Height of the image the region belongs to

    Returns:
        (x, y) of the rotation center
    """
    if use_image_center:
        return image_width / 2.0, image_height / 2.0
    return region.get_rotation_center()
