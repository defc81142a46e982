# form_field.py
# Labelled line edit with inline help and error text.
# Edits restart a single-shot timer; validation is requested only once the
# user pauses typing, or immediately when editing finishes (focus lost/Return).

from typing import List, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit # type: ignore
from PyQt5.QtCore import QTimer, pyqtSignal # type: ignore

from .ui_styles import style_input, style_hint

DEFAULT_QUIET_MS = 500


class ValidatedField(QWidget):
    validation_requested = pyqtSignal(str)
    edited = pyqtSignal(str)

    def __init__(self, name: str, label: str, placeholder: str = "", help_text: Optional[str] = None,
                 password: bool = False, quiet_ms: int = DEFAULT_QUIET_MS, parent=None):
        super().__init__(parent)
        self.name = name

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        layout.addWidget(QLabel(label))

        self.input = QLineEdit()
        self.input.setPlaceholderText(placeholder)
        if password:
            self.input.setEchoMode(QLineEdit.Password)
        style_input(self.input)
        layout.addWidget(self.input)

        self.help_label = QLabel(help_text or "")
        style_hint(self.help_label)
        self.help_label.setVisible(bool(help_text))
        layout.addWidget(self.help_label)

        self.error_label = QLabel()
        style_hint(self.error_label, error=True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        self.setLayout(layout)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(quiet_ms)
        self._timer.timeout.connect(self._request_validation)

        self.input.textEdited.connect(self._on_text_edited)
        self.input.editingFinished.connect(self._on_editing_finished)

    def text(self) -> str:
        return self.input.text()

    def clear(self):
        self._timer.stop()
        self.input.clear()
        self.set_errors([])

    def set_errors(self, errors: List[str]):
        # one message at a time, like the web forms
        has_error = bool(errors)
        self.error_label.setText(errors[0] if has_error else "")
        self.error_label.setVisible(has_error)
        style_input(self.input, has_error=has_error)

    def set_hint(self, text: str):
        self.help_label.setText(text)
        self.help_label.setVisible(bool(text))

    def set_enabled(self, enabled: bool):
        self.input.setEnabled(enabled)

    def _on_text_edited(self, _text: str):
        self.set_errors([])
        self.edited.emit(self.name)
        # restart: only the last edit in a burst triggers validation
        self._timer.start()

    def _on_editing_finished(self):
        self._timer.stop()
        self._request_validation()

    def _request_validation(self):
        self.validation_requested.emit(self.name)
