import pytest

from fcmnotify.notifications.errors import FcmDecodeError
from fcmnotify.notifications.interpreter import interpret_response


def test_interpret_full_response() -> None:
    body = (
        '{"multicast_id": 9, "success": 2, "failure": 1, "canonical_ids": 1,'
        ' "results": [{"message_id": "m1", "registration_id": "new"}, {"message_id": "m2"}, {"error": "Unavailable"}]}'
    )

    result = interpret_response(200, body)

    assert result.ok is True
    assert result.canonical_ids == 1
    assert result.results[0] == {"message_id": "m1", "registration_id": "new"}
    assert result.failed_results() == [{"error": "Unavailable"}]


def test_interpret_ignores_unknown_keys() -> None:
    result = interpret_response(200, b'{"success": 1, "extra": true}')

    assert result.ok is True
    assert result.success == 1


def test_interpret_error_field() -> None:
    result = interpret_response(200, b'{"error": "TopicsMessageRateExceeded"}')

    assert result.ok is True
    assert result.has_failures is True


def test_interpret_non_200_skips_body() -> None:
    result = interpret_response(503, b"garbage")

    assert result.ok is False
    assert result.status_code == 503


@pytest.mark.parametrize("body", [b"", b"[]", b"null", b"{"])
def test_interpret_undecodable_200(body: bytes) -> None:
    with pytest.raises(FcmDecodeError) as exc_info:
        interpret_response(200, body)

    assert exc_info.value.result.status_code == 200
    assert exc_info.value.result.ok is False


def test_interpret_null_fields_keep_zero_values() -> None:
    result = interpret_response(200, b'{"multicast_id": 1, "success": 1, "results": null, "error": null, "failure": null}')

    assert result.ok is True
    assert result.multicast_id == 1
    assert result.success == 1
    assert result.failure == 0
    assert result.results == []
    assert result.error == ""
    assert result.has_failures is False
