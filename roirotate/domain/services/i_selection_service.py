# roirotate/domain/services/i_selection_service.py
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from roirotate.domain.common.result import Result
from roirotate.domain.models.region_model import Region


class ISelectionService(ABC):
    """The open image's size, its current selection, and selection history."""

    @abstractmethod
    def get_image_size(self) -> Optional[Tuple[int, int]]:
        """(width, height) of the open image, or None if no image is open."""
        pass

    @abstractmethod
    def get_selection(self) -> Optional[Region]:
        pass

    @abstractmethod
    def set_selection(self, region: Optional[Region]) -> None:
        """Install `region` as the current selection (None clears it)."""
        pass

    @abstractmethod
    def push_previous_selection(self, region: Region) -> None:
        """Remember `region` so the next undo can restore it."""
        pass

    @abstractmethod
    def undo(self) -> Result[Region]:
        """Restore the most recently pushed selection."""
        pass

    @abstractmethod
    def open_region(self, region: Region) -> Result[Region]:
        """
        Install a region that was loaded from elsewhere.

        Creates a blank image when none is open or the region does not fit.
        """
        pass
