from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

from use_cases import bootstrap


@patch("use_cases.bootstrap.session_manager.init_session_state")
@patch("use_cases.bootstrap.auth.get_auth_base_url", return_value="")
def test_run_startup_stops_without_auth_config(_mock_base_url, mock_init) -> None:
    result = bootstrap.run_startup()

    assert result.status == "STOP"
    assert result.reason == "auth_not_configured"
    mock_init.assert_not_called()


@patch("use_cases.bootstrap.auth.get_auth_base_url", return_value="http://auth.example.com")
def test_run_startup_initializes_session_state(_mock_base_url) -> None:
    order = []
    with patch(
        "use_cases.bootstrap.session_manager.init_session_state",
        side_effect=lambda: order.append("init_session_state"),
    ):
        result = bootstrap.run_startup()

    assert result.status == "CONTINUE"
    assert result.planned_steps == ("check_auth_config", "init_session_state")
    assert order == ["init_session_state"]


@patch("auth.create_gateway", return_value=MagicMock())
@patch("use_cases.bootstrap.auth.get_auth_base_url", return_value="http://auth.example.com")
def test_run_startup_leaves_session_pending(_mock_base_url, _mock_gateway) -> None:
    bootstrap.session_manager.st.session_state.clear()
    bootstrap.session_manager.st.query_params.clear()

    bootstrap.run_startup()

    # The first fetch belongs to the first view entry, not to startup
    assert bootstrap.session_manager.get_store().pending is True


def test_health_status_reports_utc_time() -> None:
    payload = bootstrap.health_status()

    assert payload["status"] == "ok"
    assert datetime.fromisoformat(payload["uptime"]).utcoffset() == timedelta(0)
