from unittest.mock import patch

from infrastructure import observability


def test_scrubber_redacts_sensitive_frame_vars():
    event = {
        "exception": {
            "values": [
                {
                    "stacktrace": {
                        "frames": [
                            {"vars": {"password": "hunter2", "email": "a@b.com", "inp": {"confirm_password": "x"}}},
                            {"vars": {"token": "short"}},
                        ]
                    }
                }
            ]
        }
    }

    scrubbed = observability._scrub_sensitive_data(event, {})

    frames = scrubbed["exception"]["values"][0]["stacktrace"]["frames"]
    assert frames[0]["vars"]["password"] == "[REDACTED]"
    assert frames[0]["vars"]["email"] == "a@b.com"
    assert frames[0]["vars"]["inp"]["confirm_password"] == "[REDACTED]"
    assert frames[1]["vars"]["token"] == "[REDACTED]"


def test_scrubber_masks_long_token_like_strings():
    long_token = "x" * 40
    event = {
        "request": {
            "headers": {"X-Debug": f"value {long_token}", "Authorization": "Bearer abc"},
            "cookies": {"auth.session_token": long_token},
        }
    }

    scrubbed = observability._scrub_sensitive_data(event, {})

    assert scrubbed["request"]["headers"]["X-Debug"] == "value [REDACTED]"
    assert scrubbed["request"]["headers"]["Authorization"] == "[REDACTED]"
    assert scrubbed["request"]["cookies"] == {"auth.session_token": "[REDACTED]"}


def test_scrubber_tolerates_events_without_exception():
    assert observability._scrub_sensitive_data({"message": "hi"}, {}) == {"message": "hi"}


@patch("infrastructure.observability.sentry_sdk.init")
def test_setup_without_dsn_skips_sentry(mock_init, monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    observability.setup_observability()
    mock_init.assert_not_called()


@patch("infrastructure.observability.sentry_sdk.init")
def test_setup_with_dsn_initializes_sentry(mock_init, monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", "https://public@sentry.example.com/1")
    monkeypatch.setenv("SENTRY_ENV", "test")

    observability.setup_observability()

    mock_init.assert_called_once()
    kwargs = mock_init.call_args.kwargs
    assert kwargs["environment"] == "test"
    assert kwargs["send_default_pii"] is False
    assert kwargs["before_send"] is observability._scrub_sensitive_data
