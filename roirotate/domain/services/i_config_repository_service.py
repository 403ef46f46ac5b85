# roirotate/domain/services/i_config_repository_service.py
"""
Configuration repository interface.

Holds the settings that outlive a single command, such as the last angle
entered in the Rotate Selection prompt.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any

from roirotate.domain.common.result import Result


class IConfigRepository(ABC):
    """Interface for loading, saving, and accessing configuration settings."""

    @abstractmethod
    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        """
        Load configuration from storage.

        Args:
            force_reload: Whether to bypass the cache

        Returns:
            Result containing the configuration dictionary
        """
        pass

    @abstractmethod
    def save_config(self, config: Dict[str, Any]) -> Result[bool]:
        """
        Save configuration to storage.

        Args:
            config: Configuration dictionary

        Returns:
            Result indicating success or failure
        """
        pass

    @abstractmethod
    def get_global_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting, or `default` when missing or unreadable."""
        pass

    @abstractmethod
    def set_global_setting(self, key: str, value: Any) -> Result[bool]:
        """Set a setting and save."""
        pass

    @abstractmethod
    def get_default_angle(self) -> float:
        """Angle offered by the next Rotate Selection prompt, in degrees."""
        pass

    @abstractmethod
    def set_default_angle(self, angle: float) -> Result[bool]:
        pass

    @abstractmethod
    def get_rotate_around_image_center(self) -> bool:
        """Initial state of the "Rotate around image center" checkbox."""
        pass

    @abstractmethod
    def set_rotate_around_image_center(self, value: bool) -> Result[bool]:
        pass
