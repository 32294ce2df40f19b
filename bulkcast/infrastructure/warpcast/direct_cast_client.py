"""
Direct Cast Client - Warpcast Direct Message API
=================================================

ARCHITECTURAL DECISION:
- One PUT request per message, authenticated with a bearer token
- No retry, backoff or rate limiting; the caller decides what a failure means
- Failures are logged here and re-raised as RequestError so the caller can
  record them

USAGE:
    client = DirectCastClient(api_key="wc_secret_...")
    payload = client.send("123", "Hello!", str(uuid.uuid4()))
    print(serialize_payload(payload))
"""

import json
import logging
from typing import Any, Optional

import requests

from ..config import WarpcastSettings

logger = logging.getLogger(__name__)


class RequestError(Exception):
    """
    Raised when a direct cast request fails.

    `detail` holds the serialized error body when the API answered,
    otherwise the transport error message.
    """

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def serialize_payload(payload: Any) -> str:
    """Compact JSON encoding used for the report's Response column."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _decode_body(response: requests.Response) -> Any:
    """JSON body if there is one, else the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class DirectCastClient:
    """
    Client for the Warpcast direct cast endpoint.

    The endpoint and timeout default to WarpcastSettings; timeout None keeps
    the requests default.
    """

    DEFAULT_API_URL = WarpcastSettings.api_url

    def __init__(
        self,
        api_key: str,
        api_url: str = "",
        timeout: Optional[float] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url or self.DEFAULT_API_URL
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: WarpcastSettings) -> "DirectCastClient":
        return cls(
            api_key=settings.api_key,
            api_url=settings.api_url,
            timeout=settings.timeout_seconds,
        )

    def send(self, recipient_fid, message, idempotency_key: str) -> Any:
        """
        Send one direct cast.

        Args:
            recipient_fid: Recipient identifier, passed through unchanged.
            message: Message text, passed through unchanged.
            idempotency_key: Deduplication token for this attempt.

        Returns:
            The decoded response payload.

        Raises:
            RequestError: transport failure or non-success status.
        """
        payload = {
            "recipientFid": recipient_fid,
            "message": message,
            "idempotencyKey": idempotency_key,
        }
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        logger.info(f"Sending request: {payload}")

        try:
            response = requests.put(
                self._api_url,
                headers=headers,
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return _decode_body(response)

        except requests.RequestException as e:
            if e.response is not None:
                body = _decode_body(e.response)
                logger.error(f"API response error: {body}")
                raise RequestError(serialize_payload(body), e.response.status_code) from e

            logger.error(f"API request error: {e}")
            raise RequestError(str(e)) from e
