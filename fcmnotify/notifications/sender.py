from __future__ import annotations

import json
import logging

import requests

from fcmnotify.models.message import FCM_SERVICE_URL
from fcmnotify.models.result import SendResult
from fcmnotify.notifications.builder import MessageBuilder
from fcmnotify.notifications.errors import FcmDecodeError, FcmEncodingError, FcmTransportError
from fcmnotify.notifications.interpreter import interpret_response

logger = logging.getLogger(__name__)


class FcmNotifier(MessageBuilder):
    """Builds one message and POSTs it to the gateway.

    ``session`` is any object with a ``requests``-compatible ``post`` method,
    typically a :class:`requests.Session`. Timeouts, retries and connection
    pooling are configured on it, not here.
    """

    def __init__(
        self,
        session: requests.Session,
        api_key: str,
        service_url: str = FCM_SERVICE_URL,
    ) -> None:
        super().__init__()
        self.api_key = api_key
        self.service_url = service_url
        self._session = session

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"key={self.api_key}",
            "Content-Type": "application/json",
        }

    def _encode(self) -> bytes:
        try:
            return json.dumps(self.message.to_wire(), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            logger.error("FCM message encoding failed", extra={"error": str(exc)})
            raise FcmEncodingError(f"Cannot encode message: {exc}") from exc

    def send(self) -> SendResult:
        """POST the current message once and interpret the response.

        A non-200 status is returned as ``ok=False`` rather than raised.

        Raises:
            FcmEncodingError: the message is not JSON-serializable.
            FcmTransportError: the request did not complete.
            FcmDecodeError: status 200 with a body that does not parse.
        """
        body = self._encode()
        logger.debug("Sending FCM message", extra={"url": self.service_url, "bytes": len(body)})

        try:
            response = self._session.post(self.service_url, data=body, headers=self._headers())
        except requests.RequestException as exc:
            logger.error("FCM request failed", extra={"url": self.service_url, "error": str(exc)})
            raise FcmTransportError(f"FCM request failed: {exc}") from exc

        try:
            result = interpret_response(response.status_code, response.content)
        except FcmDecodeError as exc:
            logger.error("FCM response decoding failed", extra={"status_code": response.status_code, "error": str(exc)})
            raise

        if not result.ok:
            logger.warning("FCM gateway rejected request", extra={"status_code": result.status_code})
        elif result.has_failures:
            logger.warning(
                "FCM gateway reported failed targets",
                extra={"failure": result.failure, "error": result.error, "multicast_id": result.multicast_id},
            )
        else:
            logger.info(
                "FCM message sent",
                extra={"success": result.success, "multicast_id": result.multicast_id},
            )
        return result
