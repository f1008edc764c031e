from app.utils.errors import (
    ConfigurationError,
    CorsRejectedError,
    ErrorKind,
    UpstreamError,
    ValidationError,
    error_payload,
    status_for,
)


def test_default_statuses():
    assert ValidationError("x").status_code == 400
    assert ConfigurationError("x").status_code == 500
    assert UpstreamError("x").status_code == 502
    assert UpstreamError("x", status_code=503).status_code == 503
    assert CorsRejectedError("x").status_code == 403


def test_status_for_defaults_to_500():
    assert status_for(RuntimeError("x")) == 500
    assert status_for(UpstreamError("x", status_code=429)) == 429


def test_error_payload_debug_adds_kind():
    err = ConfigurationError("GEMINI_API_KEY is not configured")
    assert error_payload(err) == {"message": "GEMINI_API_KEY is not configured"}
    assert error_payload(err, include_debug=True) == {
        "message": "GEMINI_API_KEY is not configured",
        "kind": ErrorKind.CONFIGURATION.value,
    }


def test_unexpected_error_payload():
    try:
        raise KeyError("boom")
    except KeyError as e:
        debug = error_payload(e, include_debug=True)
        plain = error_payload(e)

    assert plain == {"message": "Internal Server Error"}
    assert debug["kind"] == "internal"
    assert "KeyError" in debug["stack"]
