# login_page.py
# Login page: username, password (hidden), Sign In button and a link to registration.
# A token returned by the server is kept in the TokenStore for later calls.

import logging

from PyQt5.QtWidgets import QPushButton, QLabel, QHBoxLayout # type: ignore
from PyQt5.QtCore import Qt # type: ignore

from .api_client import Outcome, format_error_message
from .base_page import FormPage
from .form_field import ValidatedField
from .ui_styles import style_button
from .validators import LOGIN_RULES

logger = logging.getLogger(__name__)


class LoginPage(FormPage):
    page_name = "LoginPage"
    rule_set = LOGIN_RULES

    def __init__(self, parent_stack=None, app_state=None):
        super().__init__(parent_stack, app_state)
        self.init_ui()

    def init_ui(self):
        outer, card = self.build_card("Sign In", "Welcome back to Simple Go Messenger")

        self.add_field(card, ValidatedField("login", "Username", placeholder="Enter your username"))
        self.add_field(card, ValidatedField("password", "Password", placeholder="Enter your password", password=True))

        self.submit_button = QPushButton("Sign In")
        self.submit_button.clicked.connect(self.on_login_clicked)
        style_button(self.submit_button)
        card.addWidget(self.submit_button, alignment=Qt.AlignCenter)

        row = QHBoxLayout()
        row.setAlignment(Qt.AlignCenter)
        row.addWidget(QLabel("Don't have an account?"))
        reg_btn = QPushButton("Create one here")
        reg_btn.clicked.connect(lambda: self.navigate("RegisterPage"))
        style_button(reg_btn, outline=True)
        row.addWidget(reg_btn)
        card.addLayout(row)

        self.setLayout(outer)

    def on_login_clicked(self):
        self.show_message("")
        if not self.validate_all():
            self.show_message("Please fill in all required fields", "error")
            return

        api = self.api
        if not api:
            self.show_message("API client not initialized.", "error")
            return

        login = self.fields["login"].text().strip()
        password = self.fields["password"].text()
        self.set_loading(True)
        self.runner.submit(lambda: api.login(login, password), self.on_login_finished)

    def on_login_finished(self, outcome: Outcome):
        self.set_loading(False)
        if not outcome.success:
            text = format_error_message(outcome)
            logger.info(f"[LoginPage] login failed: {text} (status {outcome.http_status})")
            self.show_message(text, "error")
            return

        data = outcome.data if isinstance(outcome.data, dict) else {}
        token = data.get("token")
        if token and self.tokens is not None:
            self.tokens.set(token)
        self.app_state["user"] = {"id": data.get("id"), "login": data.get("login")}
        logger.info(f"[LoginPage] signed in as {data.get('login')!r}")

        self.reset_form()
        self.navigate("HomePage")
