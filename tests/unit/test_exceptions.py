"""Unit tests for exception hierarchy."""

from advisor_portal.core.exceptions import (
    ConflictError,
    NotFoundError,
    PortalException,
    RemoteRejectedError,
    RemoteUnavailableError,
    UnauthorizedError,
    ValidationError,
)


def test_status_codes():
    assert ValidationError("bad").status_code == 400
    assert ConflictError().status_code == 400
    assert UnauthorizedError().status_code == 401
    assert NotFoundError("Message", 3).status_code == 404
    assert RemoteUnavailableError().status_code == 500


def test_not_found_error():
    exc = NotFoundError("Message", 3)

    assert exc.resource == "Message"
    assert exc.id == 3
    assert exc.message == "Message with id 3 not found"
    assert exc.to_body() == {"error": "not_found", "message": "Message with id 3 not found"}


def test_remote_rejected_relays_body():
    """Test that remote errors keep the remote status and body."""
    body = {"detail": "Invalid email or password"}
    exc = RemoteRejectedError(403, body)

    assert exc.status_code == 403
    assert exc.message == "Invalid email or password"
    assert exc.to_body() is body


def test_remote_rejected_without_message():
    exc = RemoteRejectedError(502, ["unexpected"])

    assert exc.message == "Remote service returned 502"


def test_remote_unavailable_is_distinct_from_rejection():
    body = RemoteUnavailableError().to_body()

    assert body["error"] == "remote_unavailable"
    assert body != RemoteRejectedError(500, {"detail": "boom"}).to_body()


def test_exception_inheritance():
    for cls in (
        ValidationError,
        ConflictError,
        UnauthorizedError,
        NotFoundError,
        RemoteUnavailableError,
        RemoteRejectedError,
    ):
        assert issubclass(cls, PortalException)
