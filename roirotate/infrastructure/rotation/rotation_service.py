# roirotate/infrastructure/rotation/rotation_service.py
import math
from typing import Optional, Tuple

from roirotate.domain.common.errors import RegionKindError, ValidationError
from roirotate.domain.common.result import Result
from roirotate.domain.geometry import center_resolver, shape_rotator
from roirotate.domain.models.region_model import Region
from roirotate.domain.services.i_logger_service import ILoggerService
from roirotate.domain.services.i_rotation_service import IRotationService


class RotationService(IRotationService):
    """
    Logged, Result-returning front end to the rotation functions.

    Checks the basic contract (a region, finite numbers) before calling into
    the geometry code. A RegionKindError is a bug, so it is logged and re-raised.
    """

    def __init__(self, logger: ILoggerService):
        self.logger = logger

    def resolve_center(self, region: Region, use_image_center: bool,
                       image_width: float, image_height: float) -> Result[Tuple[float, float]]:
        if region is None:
            return Result.fail(ValidationError("No region to resolve a center for"))
        if use_image_center and not self._all_finite(image_width, image_height):
            return Result.fail(ValidationError(
                message="Image size must be finite",
                details={"width": image_width, "height": image_height}
            ))

        center = center_resolver.resolve_center(region, use_image_center, image_width, image_height)
        self.logger.debug("Resolved rotation center", kind=region.kind.value,
                          image_center=use_image_center, x=center[0], y=center[1])
        return Result.ok(center)

    def rotate(self, region: Region, angle: float,
               xcenter: float, ycenter: float) -> Result[Optional[Region]]:
        validation = self._validate(region, angle, xcenter, ycenter)
        if validation.is_failure:
            return validation

        try:
            rotated = shape_rotator.rotate(region, angle, xcenter, ycenter)
        except RegionKindError as e:
            self.logger.critical(str(e), kind=e.kind)
            raise

        if rotated is None:
            self.logger.debug("Image stamp rotated in place", angle=angle)
        else:
            self.logger.debug("Rotated region", source=region.kind.value, result=rotated.kind.value,
                              angle=angle, x=xcenter, y=ycenter)
        return Result.ok(rotated)

    def rotate_about_anchor(self, region: Region, angle: float) -> Result[Region]:
        validation = self._validate(region, angle)
        if validation.is_failure:
            return validation

        try:
            rotated = shape_rotator.rotate_about_anchor(region, angle)
        except RegionKindError as e:
            self.logger.critical(str(e), kind=e.kind)
            raise

        self.logger.debug("Rotated region about its anchor", kind=rotated.kind.value,
                          angle=angle, center=rotated.rotation_center)
        return Result.ok(rotated)

    def _validate(self, region: Optional[Region], angle: float, *center: float) -> Result[None]:
        if region is None:
            return Result.fail(ValidationError("No region to rotate"))
        if not self._all_finite(angle, *center):
            error = ValidationError(
                message="Angle and rotation center must be finite numbers",
                details={"angle": angle, "center": center}
            )
            self.logger.warning(str(error))
            return Result.fail(error)
        return Result.ok(None)

    @staticmethod
    def _all_finite(*values: float) -> bool:
        try:
            return all(math.isfinite(value) for value in values)
        except TypeError:
            return False
