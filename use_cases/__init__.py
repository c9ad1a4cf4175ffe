"""Application layer contracts for orchestrating high-level flows."""

from .auth_flow import AuthFlowResult, AuthFlowStatus, ensure_authenticated_session, ensure_view_access
from .auth_gateway import AuthFailure, AuthGateway, AuthGatewayError, AuthRedirect, AuthSuccess
from .bootstrap import StartupResult, StartupStatus, run_startup
from .identity_flow import IdentityPanel, IdentityView
from .redirect_policy import RedirectDecision, ViewKind, evaluate, is_authenticated
from .session_models import CredentialInput, Session, SignUpInput, User
from .session_store import SessionSnapshot, SessionStore
from .sign_in_flow import Idle, InFlight, SignInOrchestrator
from .validation import ValidationError, validate_credentials, validate_sign_up

__all__ = [
    "AuthFailure",
    "AuthFlowResult",
    "AuthFlowStatus",
    "AuthGateway",
    "AuthGatewayError",
    "AuthRedirect",
    "AuthSuccess",
    "CredentialInput",
    "Idle",
    "IdentityPanel",
    "IdentityView",
    "InFlight",
    "RedirectDecision",
    "Session",
    "SessionSnapshot",
    "SessionStore",
    "SignInOrchestrator",
    "SignUpInput",
    "StartupResult",
    "StartupStatus",
    "User",
    "ValidationError",
    "ViewKind",
    "ensure_authenticated_session",
    "ensure_view_access",
    "evaluate",
    "is_authenticated",
    "run_startup",
    "validate_credentials",
    "validate_sign_up",
]
