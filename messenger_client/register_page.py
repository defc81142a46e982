# register_page.py
# Register page: username, password, password confirmation and a Create Account button.
# Field rules come from validators.REGISTRATION_RULES; the server is only
# contacted once every field passes.

import logging

from PyQt5.QtWidgets import QPushButton, QLabel, QHBoxLayout # type: ignore
from PyQt5.QtCore import Qt, QTimer # type: ignore

from .api_client import Outcome, format_error_message
from .base_page import FormPage
from .form_field import ValidatedField
from .ui_styles import style_button
from .validators import REGISTRATION_RULES, password_strength

logger = logging.getLogger(__name__)

REDIRECT_DELAY_MS = 2000
PASSWORD_HELP = "Password must be at least 6 characters long"


class RegisterPage(FormPage):
    page_name = "RegisterPage"
    rule_set = REGISTRATION_RULES

    def __init__(self, parent_stack=None, app_state=None):
        super().__init__(parent_stack, app_state)
        self.init_ui()

    def init_ui(self):
        outer, card = self.build_card("Create Account", "Join Simple Go Messenger today")

        self.add_field(card, ValidatedField(
            "login", "Username", placeholder="Enter your username",
            help_text="Username must be 3-50 characters long"))
        self.add_field(card, ValidatedField(
            "password", "Password", placeholder="Enter your password",
            help_text=PASSWORD_HELP, password=True))
        self.fields["password"].input.textChanged.connect(self.on_password_changed)
        self.add_field(card, ValidatedField(
            "confirmPassword", "Confirm Password", placeholder="Confirm your password", password=True))

        self.submit_button = QPushButton("Create Account")
        self.submit_button.clicked.connect(self.on_register_clicked)
        style_button(self.submit_button)
        card.addWidget(self.submit_button, alignment=Qt.AlignCenter)

        row = QHBoxLayout()
        row.setAlignment(Qt.AlignCenter)
        row.addWidget(QLabel("Already have an account?"))
        login_btn = QPushButton("Sign in here")
        login_btn.clicked.connect(lambda: self.navigate("LoginPage"))
        style_button(login_btn, outline=True)
        row.addWidget(login_btn)
        card.addLayout(row)

        self.setLayout(outer)

    def on_password_changed(self, text: str):
        strength = password_strength(text)
        self.fields["password"].set_hint(f"Password strength: {strength}" if strength else PASSWORD_HELP)

    def on_register_clicked(self):
        self.show_message("")
        if not self.validate_all():
            self.show_message("Please fix the errors below before submitting", "error")
            return

        api = self.api
        if not api:
            self.show_message("API client not initialized.", "error")
            return

        login = self.fields["login"].text().strip()
        password = self.fields["password"].text()
        logger.info(f"[RegisterPage] registering {login!r}")
        self.set_loading(True)
        self.runner.submit(lambda: api.register(login, password), self.on_register_finished)

    def on_register_finished(self, outcome: Outcome):
        self.set_loading(False)
        if outcome.success:
            self.reset_form()
            self.show_message("Account created successfully! You can now sign in.", "success")
            QTimer.singleShot(REDIRECT_DELAY_MS, lambda: self.navigate("LoginPage"))
            return

        text = format_error_message(outcome)
        logger.info(f"[RegisterPage] registration failed: {text} (status {outcome.http_status})")
        if "exists" in text.lower():
            self.mark_error("login", ["This username is already taken"])
        self.show_message(text, "error")
