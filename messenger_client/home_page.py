# home_page.py
# Landing page: product blurb, Get Started / Sign In buttons and a server status box.
# The health check runs each time the page is shown; with a stored token the
# signed-in user is looked up as well.

import logging

from PyQt5.QtWidgets import QPushButton, QLabel, QHBoxLayout # type: ignore
from PyQt5.QtCore import Qt # type: ignore

from .api_client import Outcome, format_error_message
from .base_page import BasePage
from .tasks import OutcomeRunner
from .ui_styles import style_button, style_hint, show_message

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    "checking": ("Checking server connection...", "info"),
    "healthy": ("Server is running and healthy", "success"),
    "error": ("Unable to connect to server. Please make sure the server is running.", "error"),
}


class HomePage(BasePage):
    page_name = "HomePage"

    def __init__(self, parent_stack=None, app_state=None):
        super().__init__(parent_stack, app_state)
        self.user_runner = OutcomeRunner(self)
        self.server_status = "checking"
        self.init_ui()

    def init_ui(self):
        outer, card = self.build_card(
            "Simple Go Messenger",
            "A simple messaging application. Connect with friends and colleagues in a secure environment.",
        )

        row = QHBoxLayout()
        row.setAlignment(Qt.AlignCenter)
        start_btn = QPushButton("Get Started")
        start_btn.clicked.connect(lambda: self.navigate("RegisterPage"))
        style_button(start_btn, min_height=44)
        row.addWidget(start_btn)
        signin_btn = QPushButton("Sign In")
        signin_btn.clicked.connect(lambda: self.navigate("LoginPage"))
        style_button(signin_btn, min_height=44, outline=True)
        row.addWidget(signin_btn)
        card.addLayout(row)

        self.user_label = QLabel()
        style_hint(self.user_label)
        self.user_label.setAlignment(Qt.AlignCenter)
        card.addWidget(self.user_label)

        self.signout_btn = QPushButton("Sign Out")
        self.signout_btn.clicked.connect(self.sign_out)
        style_button(self.signout_btn, outline=True)
        self.signout_btn.setVisible(False)
        card.addWidget(self.signout_btn, alignment=Qt.AlignCenter)

        status_title = QLabel("Server Status")
        status_title.setAlignment(Qt.AlignCenter)
        card.addWidget(status_title)
        self.status_label = QLabel()
        card.addWidget(self.status_label)

        self.setLayout(outer)
        self.set_server_status("checking")

    def showEvent(self, event):
        super().showEvent(event)
        self.refresh()

    def refresh(self):
        api = self.api
        if not api:
            self.set_server_status("error")
            return
        self.set_server_status("checking")
        self.runner.submit(api.health_check, self.on_health_checked)

        token = self.tokens.get() if self.tokens is not None else None
        if token:
            self.user_runner.submit(lambda: api.get_current_user(token), self.on_user_loaded)
        else:
            self.show_user(None)

    def set_server_status(self, status: str):
        self.server_status = status
        text, kind = STATUS_TEXT[status]
        show_message(self.status_label, text, kind)

    def on_health_checked(self, outcome: Outcome):
        if outcome.success:
            self.set_server_status("healthy")
        else:
            logger.warning(f"[HomePage] health check failed: {format_error_message(outcome)}")
            self.set_server_status("error")

    def on_user_loaded(self, outcome: Outcome):
        if outcome.http_status == 401:
            # expired or revoked token
            self.sign_out()
            self.navigate("LoginPage")
            return
        if not outcome.success:
            logger.info(f"[HomePage] could not load current user: {format_error_message(outcome)}")
        user = outcome.data if outcome.success and isinstance(outcome.data, dict) else None
        self.app_state["user"] = user
        self.show_user(user)

    def show_user(self, user):
        if user and user.get("login"):
            self.user_label.setText(f"Signed in as {user['login']}")
        else:
            self.user_label.setText("")
        self.signout_btn.setVisible(bool(user))

    def sign_out(self):
        self.user_runner.discard()
        if self.tokens is not None:
            self.tokens.clear()
        self.app_state["user"] = None
        self.show_user(None)
