"""Desktop client for the Simple Go Messenger backend.

The validation and request layers (`validators`, `api_client`, `config`) have
no Qt dependency and can be reused by any front end; the page modules wire
them into PyQt5 widgets.
"""
