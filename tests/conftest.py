# tests/conftest.py
import logging

import numpy as np
import pytest

from roirotate.domain.models.region_model import Region, StyleAttributes
from roirotate.infrastructure.config.json_config_repository import JsonConfigRepository
from roirotate.infrastructure.logging.logger_service import ConsoleLoggerService


@pytest.fixture
def logger():
    return ConsoleLoggerService(level=logging.DEBUG, name="roirotate-tests")


@pytest.fixture
def style():
    return StyleAttributes(
        name="cell-1",
        stroke_color="#ffff00",
        stroke_width=1.0,
        fill_color="#40ff0000",
        position=3,
        group=2,
        properties={"label": "nucleus"},
    )


@pytest.fixture
def config_repository(tmp_path, logger):
    return JsonConfigRepository(str(tmp_path / "roirotate.json"), logger)


class MysteryRegion(Region):
    """A region whose kind no rotation strategy knows about."""

    kind = "mystery"

    def get_bounds(self):
        return 0.0, 0.0, 1.0, 1.0

    def get_float_polygon(self):
        return np.zeros((1, 2))

    def clone(self):
        return MysteryRegion()


@pytest.fixture
def mystery_region():
    return MysteryRegion()
