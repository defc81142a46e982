# app.py
# Entry point for the Simple Go Messenger desktop client.
# Creates a QStackedWidget and registers each page (one file per page).
# Pages navigate by switching the current widget of the shared stack.

import logging
import sys
from typing import Optional

from PyQt5.QtWidgets import QApplication, QStackedWidget # type: ignore

from .api_client import ApiClient
from .config import ClientConfig
from .home_page import HomePage
from .login_page import LoginPage
from .register_page import RegisterPage
from .session import TokenStore

logger = logging.getLogger(__name__)


def build_app(config: Optional[ClientConfig] = None):
    app = QApplication(sys.argv)
    config = config or ClientConfig.from_env()
    logger.info(f"Using API at {config.base_url}")

    # Shared application state (in-memory). Holds the API client, token store and current user.
    app_state = {"api": ApiClient(config), "tokens": TokenStore(), "user": None}

    stack = QStackedWidget()
    stack.setWindowTitle("Simple Go Messenger")
    stack.resize(800, 600)

    home = HomePage(parent_stack=stack, app_state=app_state)
    login = LoginPage(parent_stack=stack, app_state=app_state)
    register = RegisterPage(parent_stack=stack, app_state=app_state)

    stack.addWidget(home)
    stack.addWidget(login)
    stack.addWidget(register)

    stack.setCurrentWidget(home)
    stack.show()
    return app, stack


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
    app, stack = build_app()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
