# roirotate/infrastructure/session/selection_service.py
import math
from collections import deque
from typing import Optional, Tuple

from PIL import Image

from roirotate.domain.common.errors import ResourceError, ValidationError
from roirotate.domain.common.result import Result
from roirotate.domain.models.region_model import Region
from roirotate.domain.services.i_logger_service import ILoggerService
from roirotate.domain.services.i_selection_service import ISelectionService

CANVAS_MARGIN = 10


class InMemorySelectionService(ISelectionService):
    """Selection session over a Pillow image held in memory."""

    def __init__(self, logger: ILoggerService, image: Optional[Image.Image] = None,
                 history_size: int = 20):
        """
        Args:
            logger: Logger service
            image: The open image, if any
            history_size: How many previous selections undo can reach
        """
        self.logger = logger
        self.image = image
        self._selection: Optional[Region] = None
        self._history = deque(maxlen=history_size)

    def get_image_size(self) -> Optional[Tuple[int, int]]:
        if self.image is None:
            return None
        return self.image.width, self.image.height

    def get_selection(self) -> Optional[Region]:
        return self._selection

    def set_selection(self, region: Optional[Region]) -> None:
        self._selection = region
        if region is None:
            self.logger.debug("Selection cleared")
        else:
            self.logger.debug("Selection installed", kind=region.kind.value, bounds=region.get_bounds())

    def push_previous_selection(self, region: Region) -> None:
        self._history.append(region)

    def undo(self) -> Result[Region]:
        if not self._history:
            return Result.fail(ValidationError("Nothing to undo"))
        region = self._history.pop()
        self.set_selection(region)
        return Result.ok(region)

    def open_region(self, region: Region) -> Result[Region]:
        if region is None:
            return Result.fail(ValidationError("No region to open"))

        x, y, width, height = region.get_bounds()
        right = math.ceil(x + width)
        bottom = math.ceil(y + height)
        if self.image is None or self.image.width < right or self.image.height < bottom:
            size = (max(right, 0) + CANVAS_MARGIN, max(bottom, 0) + CANVAS_MARGIN)
            result = Result.from_operation(
                lambda: Image.new("L", size),
                self.logger,
                ResourceError,
                "Failed to create canvas for region",
                size=size
            )
            if result.is_failure:
                return Result.fail(result.error)
            self.image = result.value
            self.logger.info("Created blank image for region", width=size[0], height=size[1])

        self.set_selection(region)
        return Result.ok(region)
