"""Startup orchestration for application bootstrap."""

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from typing import Literal, Optional, Tuple

import auth
from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]
    reason: Optional[str] = None


def run_startup() -> StartupResult:
    """Check configuration and prepare per-browser session state."""
    executed_steps = []

    if not auth.get_auth_base_url():
        log.error("AUTH_BASE_URL is not configured")
        return StartupResult(status="STOP", planned_steps=tuple(executed_steps), reason="auth_not_configured")
    executed_steps.append("check_auth_config")

    # Store and gateway must exist before any view reads the session.
    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))


def health_status() -> dict:
    """Payload for the `?health=1` load-balancer heartbeat."""
    return {"status": "ok", "version": "1.0", "uptime": datetime.now(timezone.utc).isoformat()}
