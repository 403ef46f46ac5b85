# tests/unit/test_qt_ui_service.py
import os

import pytest
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from roirotate.domain.common.errors import ErrorCategory
from roirotate.domain.models.rotation_options import RotationOptions
from roirotate.infrastructure.ui import qt_ui_service
from roirotate.infrastructure.ui.qt_ui_service import QtUIService
from roirotate.presentation.components.rotate_selection_dialog import RotateSelectionDialog


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QApplication.instance() or QApplication([])


def type_angle(dialog, text):
    dialog.angle_edit.clear()
    QTest.keyClicks(dialog.angle_edit, text)


class TestRotateSelectionDialog:
    @pytest.mark.parametrize("default, shown", [(15.0, "15"), (-90, "-90"), (22.5, "22.50"), (725.0, "725")])
    def test_default_angle_display(self, qapp, default, shown):
        dialog = RotateSelectionDialog(default, False)

        assert dialog.angle_edit.text() == shown

    @pytest.mark.parametrize("typed, expected", [("12.5", 12.5), ("-0.25", -0.25), ("725", 725.0),
                                                 ("-1080.75", -1080.75)])
    def test_typed_angle_is_taken_as_is(self, qapp, typed, expected):
        dialog = RotateSelectionDialog(15.0, False)

        type_angle(dialog, typed)

        assert dialog.options().angle == expected
        assert dialog.ok_btn.isEnabled()

    def test_large_default_is_not_clamped(self, qapp):
        assert RotateSelectionDialog(725.0, False).options().angle == 725.0

    def test_letters_are_not_accepted(self, qapp):
        dialog = RotateSelectionDialog(15.0, False)

        type_angle(dialog, "2x5")

        assert dialog.angle_edit.text() == "25"

    def test_empty_angle_disables_ok(self, qapp):
        dialog = RotateSelectionDialog(15.0, False)

        dialog.angle_edit.clear()

        assert not dialog.ok_btn.isEnabled()
        with pytest.raises(ValueError):
            dialog.options()

    @pytest.mark.parametrize("initial", [True, False])
    def test_checkbox_round_trip(self, qapp, initial):
        dialog = RotateSelectionDialog(15.0, initial)
        assert dialog.options().rotate_around_image_center is initial

        dialog.image_center_check.setChecked(not initial)

        assert dialog.options() == RotationOptions(15.0, not initial)


class TestQtUIService:
    def test_cancel_returns_none(self, qapp, logger, monkeypatch):
        monkeypatch.setattr(RotateSelectionDialog, "exec", lambda dialog: 0)

        result = QtUIService(logger).prompt_rotation(15.0, True)

        assert result.is_success
        assert result.value is None

    def test_accepted_answers_are_returned(self, qapp, logger, monkeypatch):
        def answer(dialog):
            type_angle(dialog, "-7.5")
            dialog.image_center_check.setChecked(True)
            return 1

        monkeypatch.setattr(RotateSelectionDialog, "exec", answer)

        result = QtUIService(logger).prompt_rotation(15.0, False)

        assert result.value == RotationOptions(-7.5, True)

    def test_unusable_answer_is_a_ui_failure(self, qapp, logger, monkeypatch):
        def answer(dialog):
            dialog.angle_edit.clear()
            return 1

        monkeypatch.setattr(RotateSelectionDialog, "exec", answer)

        result = QtUIService(logger).prompt_rotation(15.0, False)

        assert result.is_failure
        assert result.error.category is ErrorCategory.UI

    def test_is_interactive(self, logger):
        assert QtUIService(logger).is_scripted is False

    @pytest.mark.parametrize("message_type, box", [("error", "critical"), ("warning", "warning"),
                                                   ("info", "information")])
    def test_show_message_picks_box(self, qapp, logger, monkeypatch, message_type, box):
        shown = []

        class RecordingBox:
            @staticmethod
            def critical(parent, title, message):
                shown.append(("critical", title, message))

            @staticmethod
            def warning(parent, title, message):
                shown.append(("warning", title, message))

            @staticmethod
            def information(parent, title, message):
                shown.append(("information", title, message))

        monkeypatch.setattr(qt_ui_service, "QMessageBox", RecordingBox)

        assert QtUIService(logger).show_message("Rotate", "Done", message_type).is_success
        assert shown == [(box, "Rotate", "Done")]
