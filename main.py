#!/usr/bin/env python3
"""
Interactive Rotate Selection.

Opens a rectangle selection (x y width height on the command line, or a
default one), shows the rotate dialog and prints the resulting outline.
Repeat the dialog until it is cancelled.
"""
import sys

from PySide6.QtWidgets import QApplication

from roirotate.application.app import initialize_app
from roirotate.application.rotate_selection_command import RotateSelectionCommand
from roirotate.domain.models.region_model import RectangleRegion
from roirotate.domain.services.i_selection_service import ISelectionService

if __name__ == "__main__":
    app = QApplication(sys.argv)
    app.setApplicationName("Rotate Selection")

    x, y, width, height = (float(v) for v in sys.argv[1:5]) if len(sys.argv) >= 5 else (20, 20, 60, 30)

    container = initialize_app()
    container.resolve(ISelectionService).open_region(RectangleRegion(x, y, width, height))
    command = container.resolve(RotateSelectionCommand)

    while True:
        result = command.run()
        if result.is_failure:
            sys.exit(1)
        if result.value is None:
            break
        print(f"{result.value.kind.value}: {result.value.get_float_polygon().round(2).tolist()}")

    sys.exit(0)
