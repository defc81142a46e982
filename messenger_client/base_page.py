"""Base page shared by the messenger forms.

Provides stack navigation, a message banner, and the glue between
`ValidatedField` widgets and the pure functions in `validators`.
"""

import logging
from typing import Dict, List, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel # type: ignore
from PyQt5.QtCore import Qt # type: ignore

from .form_field import ValidatedField
from .tasks import OutcomeRunner
from .ui_styles import set_title_label, show_message, style_hint
from .validators import FormRuleSet, form_is_valid, revalidate, validate_form


logger = logging.getLogger(__name__)


class BasePage(QWidget):
    page_name = "BasePage"

    def __init__(self, parent_stack=None, app_state=None):
        """
        parent_stack: the QStackedWidget holding every page
        app_state: shared dict with the "api" client and "tokens" store
        """
        super().__init__()
        self.setObjectName(self.page_name)
        self.parent_stack = parent_stack
        self.app_state = app_state if app_state is not None else {}
        self.runner = OutcomeRunner(self)

    @property
    def api(self):
        return self.app_state.get("api")

    @property
    def tokens(self):
        return self.app_state.get("tokens")

    def navigate(self, page_name: str):
        if not self.parent_stack:
            return
        page = self.parent_stack.findChild(QWidget, page_name)
        if page is None:
            logger.warning(f"[{self.page_name}] navigation target {page_name} not found")
            return
        self.parent_stack.setCurrentWidget(page)

    def build_card(self, title: str, subtitle: str):
        """Return (outer_layout, card_layout) with a centered title block."""
        outer = QVBoxLayout()
        outer.addStretch()

        card = QVBoxLayout()
        card.setSpacing(12)
        card.setAlignment(Qt.AlignCenter)

        title_label = QLabel(title)
        set_title_label(title_label, size=18)
        title_label.setAlignment(Qt.AlignCenter)
        card.addWidget(title_label)

        subtitle_label = QLabel(subtitle)
        style_hint(subtitle_label)
        subtitle_label.setAlignment(Qt.AlignCenter)
        card.addWidget(subtitle_label)

        self.message_label = QLabel()
        self.message_label.setVisible(False)
        card.addWidget(self.message_label)

        row = QHBoxLayout()
        row.addStretch()
        row.addLayout(card)
        row.addStretch()
        outer.addLayout(row)
        outer.addStretch()
        return outer, card

    def show_message(self, text: str, kind: str = "info"):
        show_message(self.message_label, text, kind)


class FormPage(BasePage):
    rule_set: Optional[FormRuleSet] = None

    def __init__(self, parent_stack=None, app_state=None):
        super().__init__(parent_stack, app_state)
        self.fields: Dict[str, ValidatedField] = {}

    def add_field(self, layout, field: ValidatedField):
        self.fields[field.name] = field
        field.validation_requested.connect(self.on_validation_requested)
        field.edited.connect(self.on_field_edited)
        layout.addWidget(field, alignment=Qt.AlignCenter)

    def values(self) -> Dict[str, str]:
        return {name: field.text() for name, field in self.fields.items()}

    def on_field_edited(self, _name: str):
        # typing clears any server message left over from the last submit
        self.show_message("")

    def on_validation_requested(self, name: str):
        for field_name, errors in revalidate(self.values(), self.rule_set, name).items():
            self.fields[field_name].set_errors(errors)

    def validate_all(self) -> bool:
        results = validate_form(self.values(), self.rule_set)
        for name, errors in results.items():
            self.fields[name].set_errors(errors)
        return form_is_valid(results)

    def mark_error(self, name: str, errors: List[str]):
        self.fields[name].set_errors(errors)

    def set_loading(self, loading: bool):
        for field in self.fields.values():
            field.set_enabled(not loading)
        self.submit_button.setEnabled(not loading)

    def reset_form(self):
        self.runner.discard()
        for field in self.fields.values():
            field.clear()
        self.show_message("")
        self.set_loading(False)
