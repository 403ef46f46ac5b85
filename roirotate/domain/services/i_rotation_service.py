# roirotate/domain/services/i_rotation_service.py
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from roirotate.domain.common.result import Result
from roirotate.domain.models.region_model import Region


class IRotationService(ABC):
    """Service for rotating regions."""

    @abstractmethod
    def resolve_center(self, region: Region, use_image_center: bool,
                       image_width: float, image_height: float) -> Result[Tuple[float, float]]:
        """Pivot for `region`: the image center or the region's own rotation center."""
        pass

    @abstractmethod
    def rotate(self, region: Region, angle: float,
               xcenter: float, ycenter: float) -> Result[Optional[Region]]:
        """
        Rotate a region about an explicit center.

        Returns:
            Result containing the rotated region, or None for an image stamp
            that rotated in place
        """
        pass

    @abstractmethod
    def rotate_about_anchor(self, region: Region, angle: float) -> Result[Region]:
        """Rotate a region about its own rotation center and keep that center sticky."""
        pass
