# roirotate/application/rotate_selection_command.py
"""
The interactive Rotate Selection command.

Reads the current selection, asks for an angle, rotates, and installs the
result with the previous selection kept for undo.
"""
from typing import Optional

from roirotate.domain.common.errors import ValidationError
from roirotate.domain.common.result import Result
from roirotate.domain.models.region_model import Region
from roirotate.domain.services.i_config_repository_service import IConfigRepository
from roirotate.domain.services.i_logger_service import ILoggerService
from roirotate.domain.services.i_rotation_service import IRotationService
from roirotate.domain.services.i_selection_service import ISelectionService
from roirotate.domain.services.i_ui_service import IUIService

TITLE = "Rotate"


class RotateSelectionCommand:
    """Rotate the current selection by a user-supplied angle."""

    def __init__(self, selection_service: ISelectionService,
                 rotation_service: IRotationService,
                 ui_service: IUIService,
                 config_repository: IConfigRepository,
                 logger: ILoggerService):
        self.selection_service = selection_service
        self.rotation_service = rotation_service
        self.ui_service = ui_service
        self.config_repository = config_repository
        self.logger = logger

    def run(self) -> Result[Optional[Region]]:
        """
        Run the command once.

        Returns:
            Result containing the installed selection, or None if the prompt
            was cancelled. An image stamp is rotated in place and returned
            itself, with nothing pushed to history.
        """
        region = self.selection_service.get_selection()
        if region is None:
            self.ui_service.show_message(TITLE, "This command requires a selection", "error")
            return Result.fail(ValidationError("This command requires a selection"))

        # scripted runs always start from the region's own center
        around_image_center = (not self.ui_service.is_scripted
                               and self.config_repository.get_rotate_around_image_center())
        prompt = self.ui_service.prompt_rotation(self.config_repository.get_default_angle(),
                                                 around_image_center)
        if prompt.is_failure:
            return Result.fail(prompt.error)
        options = prompt.value
        if options is None:
            return Result.ok(None)

        self._remember(options.angle, options.rotate_around_image_center)

        image_size = self.selection_service.get_image_size()
        if options.rotate_around_image_center and image_size is None:
            self.ui_service.show_message(TITLE, "Rotating around the image center requires an image", "error")
            return Result.fail(ValidationError("No image open to take the center from"))
        width, height = image_size or (0, 0)

        center = self.rotation_service.resolve_center(region, options.rotate_around_image_center,
                                                      width, height)
        if center.is_failure:
            return Result.fail(center.error)
        xcenter, ycenter = center.value

        rotated = self.rotation_service.rotate(region, options.angle, xcenter, ycenter)
        if rotated.is_failure:
            self.ui_service.show_message(TITLE, rotated.error.message, "error")
            return Result.fail(rotated.error)

        new_region = rotated.value
        if new_region is None:
            self.logger.info("Rotated image stamp in place", angle=options.angle)
            return Result.ok(region)

        if not options.rotate_around_image_center:
            new_region.set_rotation_center(xcenter, ycenter)

        self.selection_service.push_previous_selection(region.clone())
        self.selection_service.set_selection(new_region)
        self.logger.info("Rotated selection", angle=options.angle, kind=new_region.kind.value,
                         x=xcenter, y=ycenter)
        return Result.ok(new_region)

    def _remember(self, angle: float, around_image_center: bool) -> None:
        """Store the dialog answers as the next defaults; the angle only for interactive runs."""
        if not self.ui_service.is_scripted:
            self.config_repository.set_default_angle(angle).on_failure(
                lambda error: self.logger.warning(f"Could not remember angle: {error}"))
        self.config_repository.set_rotate_around_image_center(around_image_center).on_failure(
            lambda error: self.logger.warning(f"Could not remember center mode: {error}"))
