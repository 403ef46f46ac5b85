# roirotate/infrastructure/ui/qt_ui_service.py

from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from roirotate.domain.common.errors import UIError
from roirotate.domain.common.result import Result
from roirotate.domain.models.rotation_options import RotationOptions
from roirotate.domain.services.i_logger_service import ILoggerService
from roirotate.domain.services.i_ui_service import IUIService
from roirotate.presentation.components.rotate_selection_dialog import RotateSelectionDialog


class QtUIService(IUIService):
    """
    Interactive UI built on PySide6 modal dialogs.

    Must be called on the Qt main thread of a running QApplication.
    """

    def __init__(self, logger: ILoggerService):
        self.logger = logger

    @property
    def is_scripted(self) -> bool:
        return False

    def prompt_rotation(self, default_angle: float,
                        rotate_around_image_center: bool) -> Result[Optional[RotationOptions]]:
        if QApplication.instance() is None:
            return Result.fail(UIError("Rotation prompt needs a running QApplication"))

        dialog = RotateSelectionDialog(default_angle, rotate_around_image_center)
        if not dialog.exec():
            self.logger.debug("Rotation prompt cancelled")
            return Result.ok(None)
        return Result.from_operation(dialog.options, self.logger, UIError, "Invalid rotation answer")

    def show_message(self, title: str, message: str, message_type: str = "info") -> Result[bool]:
        if QApplication.instance() is None:
            return Result.fail(UIError("Message box needs a running QApplication",
                                       details={"title": title, "message": message}))

        if message_type == "warning":
            QMessageBox.warning(None, title, message)
        elif message_type == "error":
            QMessageBox.critical(None, title, message)
        else:
            QMessageBox.information(None, title, message)
        return Result.ok(True)
