"""HTTP API client for the messenger backend.

Every request resolves to an `Outcome`; connection problems, error statuses
and malformed bodies are all reported through it instead of being raised.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import requests

from .config import ClientConfig


logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error: unable to connect to server"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


@dataclass
class Outcome:
    success: bool
    message: str
    http_status: int
    transport_ok: bool
    data: Any = None
    error: Optional[str] = None
    transport_error: Optional[str] = None


class ApiClient:
    """JSON-over-HTTP client bound to one `ClientConfig`.

    Calls share nothing but the immutable config, so several may be awaited
    concurrently.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or ClientConfig()

    # -----------------------------
    # Public API
    # -----------------------------
    async def health_check(self) -> Outcome:
        return await self.call("/health")

    async def register(self, login: str, password: str) -> Outcome:
        return await self.call("/register", "POST", {"login": login, "password": password})

    async def login(self, login: str, password: str) -> Outcome:
        """Sign in; on success `data` may carry a `token` for the caller to keep."""
        return await self.call("/login", "POST", {"login": login, "password": password})

    async def get_current_user(self, token: str) -> Outcome:
        return await self.call("/user/me", headers={"Authorization": f"Bearer {token}"})

    async def call(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Outcome:
        url = self.config.url_for(endpoint)
        merged_headers = dict(self.config.headers)
        if headers:
            merged_headers.update(headers)
        method = method.upper()

        try:
            response = await asyncio.to_thread(
                requests.request,
                method,
                url,
                json=body,
                headers=merged_headers,
                timeout=self.config.timeout,
            )
        except (requests.RequestException, OSError) as exc:
            logger.warning(f"{method} {url} failed before a response arrived: {exc}")
            return _network_failure(exc)
        except Exception as exc:
            logger.exception(f"Unexpected error while sending {method} {url}")
            return _network_failure(exc)

        return _outcome_from_response(response)


# -----------------------------
# Internal helpers
# -----------------------------
def _network_failure(exc: Exception) -> Outcome:
    return Outcome(
        success=False,
        message=NETWORK_ERROR_MESSAGE,
        http_status=0,
        transport_ok=False,
        transport_error=str(exc) or exc.__class__.__name__,
    )


def _outcome_from_response(response: requests.Response) -> Outcome:
    status = response.status_code
    # 2xx only; requests.Response.ok also accepts 3xx
    transport_ok = 200 <= status < 300
    try:
        payload = response.json()
    except ValueError:
        logger.warning(f"Unparsable body from {response.url} (status {status})")
        return _unparsable(response, transport_ok)
    except Exception:
        # e.g. RecursionError on pathologically nested bodies
        logger.exception(f"Failed to decode body from {response.url} (status {status})")
        return _unparsable(response, transport_ok)

    if not isinstance(payload, dict):
        payload = {"data": payload}

    message = payload.get("message")
    error = payload.get("error")
    # transport fields come from the response, never from the body
    return Outcome(
        success=transport_ok and payload.get("success") is not False,
        message=message if isinstance(message, str) else "",
        http_status=status,
        transport_ok=transport_ok,
        data=payload.get("data"),
        error=error if isinstance(error, str) else None,
    )


def _unparsable(response: requests.Response, transport_ok: bool) -> Outcome:
    status = response.status_code
    return Outcome(
        success=False,
        message=f"Server returned {status}: {response.reason or ''}".rstrip(),
        http_status=status,
        transport_ok=transport_ok,
    )


def format_error_message(source: Union[Outcome, Mapping[str, Any]]) -> str:
    """Pick the text to show for a failed request.

    Precedence: the payload message, then the payload error, then a
    "Server error (status)" line when the transport reported failure, and
    finally a generic fallback.
    """
    if isinstance(source, Outcome):
        fields: Mapping[str, Any] = {
            "message": source.message,
            "error": source.error,
            "transport_ok": source.transport_ok,
            "http_status": source.http_status,
        }
    else:
        fields = source

    if fields.get("message"):
        return str(fields["message"])
    if fields.get("error"):
        return str(fields["error"])
    if fields.get("transport_ok", True) is False:
        return f"Server error ({fields.get('http_status', 0)})"
    return GENERIC_ERROR_MESSAGE
