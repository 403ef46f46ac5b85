# roirotate/infrastructure/config/json_config_repository.py

"""
JSON-based implementation of the configuration repository.

Stores configuration in a JSON file on disk.
"""
import json
import math
import os
import threading
from typing import Dict, Any

from roirotate.domain.common.errors import ConfigurationError
from roirotate.domain.common.result import Result
from roirotate.domain.services.i_config_repository_service import IConfigRepository
from roirotate.domain.services.i_logger_service import ILoggerService

DEFAULT_ANGLE = 15.0


class JsonConfigRepository(IConfigRepository):
    """
    JSON-based implementation of the configuration repository.

    The parsed file is cached and re-read when its modification time changes.
    Access is guarded by a re-entrant lock.
    """

    def __init__(self, config_file: str, logger: ILoggerService):
        """
        Args:
            config_file: Path to the JSON configuration file
            logger: Logger service
        """
        self.config_file = config_file
        self.logger = logger
        self._config_cache = None
        self._last_modified = 0.0
        self._lock = threading.RLock()

        self.DEFAULT_CONFIG = {
            "default_angle": DEFAULT_ANGLE,  # always stored as float
            "rotate_around_image_center": False,
            "app_version": "1.0.0"
        }

    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        with self._lock:
            if os.path.exists(self.config_file):
                mtime = os.path.getmtime(self.config_file)
                if mtime > self._last_modified:
                    force_reload = True

            if self._config_cache is not None and not force_reload:
                return Result.ok(self._config_cache)

            if not os.path.exists(self.config_file):
                self.logger.warning("Config file not found. Creating new configuration with default settings.",
                                    path=self.config_file)
                return self.save_config(dict(self.DEFAULT_CONFIG)).map(lambda _: self._config_cache)

            try:
                with open(self.config_file, "r") as f:
                    config = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                error = ConfigurationError(
                    message=f"Error loading config: {e}",
                    details={"path": self.config_file},
                    inner_error=e
                )
                self.logger.error(str(error))
                return Result.fail(error)

            if not isinstance(config, dict):
                return Result.fail(ConfigurationError(
                    message="Config file must contain a JSON object",
                    details={"path": self.config_file}
                ))

            self._last_modified = os.path.getmtime(self.config_file)
            self.logger.info(f"Config loaded successfully from {self.config_file}")

            if self._normalize(config):
                return self.save_config(config).map(lambda _: self._config_cache)

            self._config_cache = config
            return Result.ok(config)

    def _normalize(self, config: Dict[str, Any]) -> bool:
        """Merge missing defaults and coerce value types. Returns True if anything changed."""
        updated = False
        for key, default_value in self.DEFAULT_CONFIG.items():
            if key not in config:
                config[key] = default_value
                updated = True

        angle = config["default_angle"]
        if not isinstance(angle, float) or not math.isfinite(angle):
            try:
                angle = float(angle)
                if not math.isfinite(angle):
                    raise ValueError(angle)
            except (ValueError, TypeError):
                angle = DEFAULT_ANGLE
            config["default_angle"] = angle
            updated = True

        if not isinstance(config["rotate_around_image_center"], bool):
            config["rotate_around_image_center"] = bool(config["rotate_around_image_center"])
            updated = True

        return updated

    def save_config(self, config: Dict[str, Any]) -> Result[bool]:
        with self._lock:
            try:
                config_dir = os.path.dirname(self.config_file)
                if config_dir:
                    os.makedirs(config_dir, exist_ok=True)

                # Write to a temporary file first, then swap it in
                temp_path = f"{self.config_file}.tmp"
                with open(temp_path, "w") as f:
                    json.dump(config, f, indent=4)
                os.replace(temp_path, self.config_file)
            except (OSError, TypeError) as e:
                error = ConfigurationError(
                    message=f"Failed to save config: {e}",
                    details={"path": self.config_file},
                    inner_error=e
                )
                self.logger.error(str(error))
                return Result.fail(error)

            self.logger.debug(f"Config saved to {self.config_file}")
            self._config_cache = config
            self._last_modified = os.path.getmtime(self.config_file)

        return Result.ok(True)

    def get_global_setting(self, key: str, default: Any = None) -> Any:
        with self._lock:
            config_result = self.load_config()
            if config_result.is_failure:
                return default
            return config_result.value.get(key, default)

    def set_global_setting(self, key: str, value: Any) -> Result[bool]:
        with self._lock:
            config_result = self.load_config()
            if config_result.is_failure:
                return Result.fail(config_result.error)

            config = dict(config_result.value)
            config[key] = value
            return self.save_config(config)

    def get_default_angle(self) -> float:
        angle = self.get_global_setting("default_angle", DEFAULT_ANGLE)
        try:
            angle = float(angle)
        except (ValueError, TypeError):
            return DEFAULT_ANGLE
        return angle if math.isfinite(angle) else DEFAULT_ANGLE

    def set_default_angle(self, angle: float) -> Result[bool]:
        try:
            angle = float(angle)
        except (ValueError, TypeError):
            return Result.fail(ConfigurationError("Invalid angle, must be a number", details={"angle": angle}))
        if not math.isfinite(angle):
            return Result.fail(ConfigurationError("Invalid angle, must be finite", details={"angle": angle}))
        return self.set_global_setting("default_angle", angle)

    def get_rotate_around_image_center(self) -> bool:
        return bool(self.get_global_setting("rotate_around_image_center", False))

    def set_rotate_around_image_center(self, value: bool) -> Result[bool]:
        return self.set_global_setting("rotate_around_image_center", bool(value))
