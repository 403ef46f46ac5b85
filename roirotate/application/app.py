# roirotate/application/app.py

import logging
import os
from typing import Optional

from PIL import Image

from roirotate.application.rotate_selection_command import RotateSelectionCommand
from roirotate.domain.common.di_container import DIContainer
from roirotate.domain.services.i_config_repository_service import IConfigRepository
from roirotate.domain.services.i_logger_service import ILoggerService
from roirotate.domain.services.i_rotation_service import IRotationService
from roirotate.domain.services.i_selection_service import ISelectionService
from roirotate.domain.services.i_ui_service import IUIService
from roirotate.infrastructure.config.json_config_repository import JsonConfigRepository
from roirotate.infrastructure.logging.logger_service import ConsoleLoggerService, FileLoggerService
from roirotate.infrastructure.rotation.rotation_service import RotationService
from roirotate.infrastructure.session.selection_service import InMemorySelectionService

CONFIG_FILE_NAME = "roirotate.json"


def initialize_app(config_file: Optional[str] = None,
                   ui_service: Optional[IUIService] = None,
                   image: Optional[Image.Image] = None,
                   log_dir: Optional[str] = None,
                   level: int = logging.INFO) -> DIContainer:
    """
    Wire the application services.

    Args:
        config_file: JSON config path (default: roirotate.json in the working directory)
        ui_service: UI to use; a QtUIService is created lazily when omitted
        image: Image open in the selection session
        log_dir: Also log to a dated file in this directory
        level: Log level

    Returns:
        The populated container
    """
    container = DIContainer()

    if log_dir is not None:
        logger = FileLoggerService(level=level, log_dir=log_dir)
    else:
        logger = ConsoleLoggerService(level=level)
    container.register_instance(ILoggerService, logger)

    if config_file is None:
        config_file = os.path.join(os.getcwd(), CONFIG_FILE_NAME)
    container.register_instance(IConfigRepository, JsonConfigRepository(config_file, logger))

    container.register_instance(IRotationService, RotationService(logger))
    container.register_instance(ISelectionService, InMemorySelectionService(logger, image=image))

    if ui_service is not None:
        container.register_instance(IUIService, ui_service)
    else:
        def qt_ui_factory() -> IUIService:
            # PySide6 widgets are only imported when an interactive UI is needed
            from roirotate.infrastructure.ui.qt_ui_service import QtUIService
            return QtUIService(container.resolve(ILoggerService))

        container.register_factory(IUIService, qt_ui_factory)

    container.register_factory(
        RotateSelectionCommand,
        lambda: RotateSelectionCommand(
            selection_service=container.resolve(ISelectionService),
            rotation_service=container.resolve(IRotationService),
            ui_service=container.resolve(IUIService),
            config_repository=container.resolve(IConfigRepository),
            logger=container.resolve(ILoggerService)
        )
    )

    logger.info("Application dependencies initialized")
    return container
