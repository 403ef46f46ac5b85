#roirotate/domain/services/i_ui_service.py

from abc import ABC, abstractmethod
from typing import Optional

from roirotate.domain.common.result import Result
from roirotate.domain.models.rotation_options import RotationOptions


class IUIService(ABC):
    """Interface for the user-facing side of the rotate command."""

    @property
    @abstractmethod
    def is_scripted(self) -> bool:
        """
        True when answers come from a script rather than a person.

        Scripted runs do not change the remembered defaults.
        """
        pass

    @abstractmethod
    def prompt_rotation(self, default_angle: float,
                        rotate_around_image_center: bool) -> Result[Optional[RotationOptions]]:
        """
        Ask for the rotation angle and pivot mode.

        Args:
            default_angle: Angle to pre-fill, in degrees
            rotate_around_image_center: Initial checkbox state

        Returns:
            Result containing the options, or None if the user cancelled
        """
        pass

    @abstractmethod
    def show_message(self, title: str, message: str, message_type: str = "info") -> Result[bool]:
        """
        Show a message to the user.

        Args:
            title: Dialog title
            message: Message text
            message_type: Type of message ("info", "warning", "error")

        Returns:
            Result indicating success or failure
        """
        pass
