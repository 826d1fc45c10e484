import pytest

from fleet.results import MessageKind, Ok, error, invalid_payload, not_found, success
from fleet.utils.exceptions import AppException, raise_for_error, unwrap


def test_only_success_is_not_an_error():
    assert not success("done").is_error
    assert error("boom").is_error
    assert not_found("gone").is_error
    assert invalid_payload("bad").is_error


def test_unwrap_returns_ok_value():
    assert unwrap(Ok([1, 2])) == [1, 2]


@pytest.mark.parametrize(
    "message, status_code",
    [
        (invalid_payload("Missing required fields"), 422),
        (not_found("Vehicle not found"), 404),
        (error("Vehicle is not available"), 409),
    ],
)
def test_unwrap_raises_mapped_status(message, status_code):
    with pytest.raises(AppException) as exc_info:
        unwrap(message)
    assert exc_info.value.status_code == status_code
    assert exc_info.value.kind is message.kind
    assert exc_info.value.message == message.text


def test_raise_for_error_passes_success_through():
    message = success("Driver deleted")
    assert raise_for_error(message) is message


def test_raise_for_error_raises_not_found():
    with pytest.raises(AppException) as exc_info:
        raise_for_error(not_found("Driver not found"))
    assert exc_info.value.kind is MessageKind.NOT_FOUND
