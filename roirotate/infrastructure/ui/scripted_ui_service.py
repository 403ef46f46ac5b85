# roirotate/infrastructure/ui/scripted_ui_service.py
from collections import deque
from typing import Iterable, List, Optional, Tuple

from roirotate.domain.common.errors import UIError
from roirotate.domain.common.result import Result
from roirotate.domain.models.rotation_options import RotationOptions
from roirotate.domain.services.i_logger_service import ILoggerService
from roirotate.domain.services.i_ui_service import IUIService


class ScriptedUIService(IUIService):
    """
    Non-interactive UI that replays recorded answers.

    Each prompt consumes the next answer; None stands for a cancelled dialog.
    Messages are logged and kept in `messages` as (title, message, type).
    """

    def __init__(self, logger: ILoggerService, answers: Iterable[Optional[RotationOptions]] = ()):
        self.logger = logger
        self._answers = deque(answers)
        self.messages: List[Tuple[str, str, str]] = []

    @property
    def is_scripted(self) -> bool:
        return True

    def add_answer(self, answer: Optional[RotationOptions]) -> None:
        self._answers.append(answer)

    def prompt_rotation(self, default_angle: float,
                        rotate_around_image_center: bool) -> Result[Optional[RotationOptions]]:
        if not self._answers:
            return Result.fail(UIError(
                message="No scripted answer left for the rotation prompt",
                details={"default_angle": default_angle}
            ))
        answer = self._answers.popleft()
        self.logger.debug("Scripted rotation answer", answer=answer)
        return Result.ok(answer)

    def show_message(self, title: str, message: str, message_type: str = "info") -> Result[bool]:
        self.messages.append((title, message, message_type))
        if message_type == "error":
            self.logger.error(f"{title}: {message}")
        elif message_type == "warning":
            self.logger.warning(f"{title}: {message}")
        else:
            self.logger.info(f"{title}: {message}")
        return Result.ok(True)
