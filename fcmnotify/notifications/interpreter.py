from __future__ import annotations

from pydantic import ValidationError

from fcmnotify.models.result import GatewayResponse, SendResult
from fcmnotify.notifications.errors import FcmDecodeError

HTTP_OK = 200


def interpret_response(status_code: int, body: bytes | str) -> SendResult:
    """Map a gateway response onto a :class:`SendResult`.

    Only a 200 body is decoded. Any other status yields ``ok=False`` with the
    status recorded and no error raised; callers inspect the result.
    """
    if status_code != HTTP_OK:
        return SendResult(status_code=status_code)

    try:
        parsed = GatewayResponse.model_validate_json(body)
    except ValidationError as exc:
        raise FcmDecodeError(
            f"Unparseable gateway response: {exc}",
            result=SendResult(status_code=status_code),
        ) from exc

    return SendResult(ok=True, status_code=status_code, **parsed.model_dump())
