"""Persistent storage for the auth token returned by the login endpoint.

The API client never touches this; pages save the token after a successful
login and pass it back explicitly when they need an authenticated call.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QSettings # type: ignore


logger = logging.getLogger(__name__)

TOKEN_KEY = "auth/token"


class TokenStore:
    def __init__(self, settings: Optional[QSettings] = None) -> None:
        self._settings = settings or QSettings("SimpleGoMessenger", "messenger-client")

    def get(self) -> Optional[str]:
        token = self._settings.value(TOKEN_KEY, "", type=str)
        return token or None

    def set(self, token: str) -> None:
        self._settings.setValue(TOKEN_KEY, token)
        self._settings.sync()

    def clear(self) -> None:
        if self._settings.contains(TOKEN_KEY):
            logger.info("[TokenStore] clearing stored auth token")
        self._settings.remove(TOKEN_KEY)
        self._settings.sync()
