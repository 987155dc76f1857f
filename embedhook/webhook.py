"""Blocking webhook client.

Design:
- One ``send`` call performs exactly one POST; nothing is queued or retried.
- Success is strictly HTTP 204 (the endpoint's "no content" answer).
- Every failure is raised as a :class:`WebhookError` subclass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import requests
from requests.auth import AuthBase

if TYPE_CHECKING:
    from embedhook.message import Message

SUCCESS_STATUS = 204


class _NoAuth(AuthBase):
    """Leave the request unauthenticated; the URL carries the token.

    An explicit auth object also keeps requests from looking up ~/.netrc.
    """

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        return r


_NO_AUTH = _NoAuth()


class WebhookError(Exception):
    """Base class for every failure reported by :class:`WebhookClient`."""


class SerializationError(WebhookError):
    """Raised when the message cannot be encoded as JSON."""


class TransportError(WebhookError):
    """Raised when the POST could not be completed (DNS, connection, timeout...)."""


class RemoteRejectionError(WebhookError):
    """Raised when the endpoint answered with a status other than 204."""

    def __init__(self, status_code: int):
        """
        Args:
            status_code: HTTP status code returned by the endpoint.
        """
        self.status_code = status_code
        super().__init__(f"bad status code - {status_code}")


class WebhookClient:
    """Synchronous sender bound to a single webhook URL."""

    def __init__(
        self,
        webhook_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Create a new webhook client.

        Args:
            webhook_url: Webhook URL; any secret token is part of the URL.
            session: Session to send with. When omitted the client creates
                its own and closes it in :meth:`close`.
            timeout: Request timeout in seconds, ``None`` for no timeout.
        """
        self.url = webhook_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def send(self, message: Message) -> bool:
        """Serialize ``message`` and POST it to the webhook.

        Returns:
            True when the endpoint answered 204.

        Raises:
            SerializationError: If the message cannot be encoded.
            TransportError: If the request failed before a response arrived.
            RemoteRejectionError: If the response status is not 204.
        """
        try:
            body = message.to_json().encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"could not encode message: {exc}") from exc

        return self._post(body)

    def _post(self, body: bytes) -> bool:
        """POST raw JSON bytes and interpret the response."""
        try:
            resp = self.session.post(
                self.url,
                data=body,
                headers={"Content-Type": "application/json"},
                auth=_NO_AUTH,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"webhook request failed: {exc}") from exc

        with resp:
            try:
                # Body is read and discarded.
                resp.content
            except requests.RequestException as exc:
                raise TransportError(f"webhook response could not be read: {exc}") from exc
            self._handle_response(resp)

        return True

    def _handle_response(self, resp: requests.Response) -> None:
        """Raise unless the endpoint answered 204."""
        if resp.status_code != SUCCESS_STATUS:
            raise RemoteRejectionError(resp.status_code)

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> WebhookClient:
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        self.close()
