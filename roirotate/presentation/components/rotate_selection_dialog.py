# roirotate/presentation/components/rotate_selection_dialog.py
"""
Qt dialog asking for the angle of the Rotate Selection command.
"""
from PySide6.QtCore import Qt, QLocale
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QCheckBox, QDialog, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout
)

from roirotate.domain.models.rotation_options import RotationOptions


def format_angle(angle: float) -> str:
    """Whole angles without decimals, anything else with two."""
    angle = float(angle)
    return f"{angle:.0f}" if angle.is_integer() else f"{angle:.2f}"


class RotateSelectionDialog(QDialog):
    """Angle field, "Rotate around image center" checkbox, and a sign hint."""

    def __init__(self, default_angle: float, rotate_around_image_center: bool, parent=None):
        """
        Args:
            default_angle: Angle shown when the dialog opens, in degrees
            rotate_around_image_center: Initial checkbox state
            parent: Parent widget
        """
        super().__init__(parent)
        self.setWindowTitle("Rotate Selection")
        self.setModal(True)

        layout = QVBoxLayout(self)
        layout.setSpacing(10)

        # any finite decimal, always with "." as the separator
        locale = QLocale.c()
        locale.setNumberOptions(QLocale.NumberOption.RejectGroupSeparator)
        validator = QDoubleValidator(self)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        validator.setLocale(locale)

        angle_layout = QHBoxLayout()
        angle_layout.addWidget(QLabel("Angle:"))
        self.angle_edit = QLineEdit(format_angle(default_angle))
        self.angle_edit.setValidator(validator)
        angle_layout.addWidget(self.angle_edit)
        angle_layout.addWidget(QLabel("degrees"))
        layout.addLayout(angle_layout)

        self.image_center_check = QCheckBox("Rotate around image center")
        self.image_center_check.setChecked(rotate_around_image_center)
        layout.addWidget(self.image_center_check)

        hint = QLabel("Enter negative angle to\nrotate counter-clockwise")
        hint.setStyleSheet("color: #404040;")
        layout.addWidget(hint)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_btn)

        self.ok_btn = QPushButton("OK")
        self.ok_btn.setDefault(True)
        self.ok_btn.clicked.connect(self.accept)
        button_layout.addWidget(self.ok_btn)

        layout.addLayout(button_layout)
        self.setWindowFlags(self.windowFlags() | Qt.WindowType.WindowStaysOnTopHint)
        self.angle_edit.textChanged.connect(self._update_ok_button)

    def _update_ok_button(self) -> None:
        self.ok_btn.setEnabled(self.angle_edit.hasAcceptableInput())

    def options(self) -> RotationOptions:
        """
        The entered answers.

        Raises:
            ValueError: If the angle field does not hold a number
        """
        if not self.angle_edit.hasAcceptableInput():
            raise ValueError(f"Not an angle: {self.angle_edit.text()!r}")
        return RotationOptions(
            angle=float(self.angle_edit.text()),
            rotate_around_image_center=self.image_center_check.isChecked()
        )
