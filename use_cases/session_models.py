"""Session DTOs shared across application layers."""

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional

Provider = Literal["google", "github"]
AuthMethod = Literal["email", "google", "github"]

PROVIDERS: tuple = ("google", "github")


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    image: Optional[str] = None


@dataclass(frozen=True)
class Session:
    user: User
    expires_at: Optional[str] = None
    token: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class CredentialInput:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class SignUpInput:
    name: str
    email: str
    password: str = field(repr=False)
    confirm_password: str = field(repr=False)


def user_from_payload(data: Dict[str, Any]) -> User:
    """Build a User from the auth service JSON shape."""
    return User(
        id=str(data.get("id") or ""),
        name=str(data.get("name") or ""),
        email=str(data.get("email") or ""),
        image=data.get("image") or None,
    )


def session_from_payload(data: Optional[Dict[str, Any]]) -> Optional[Session]:
    """
    Accepts either the get-session shape ({"session": {...}, "user": {...}})
    or the sign-in shape ({"token": ..., "user": {...}}).
    Returns None when no user is present.
    """
    if not data or not isinstance(data, dict):
        return None
    user_data = data.get("user")
    if not isinstance(user_data, dict) or not user_data.get("id"):
        return None

    session_data = data.get("session") if isinstance(data.get("session"), dict) else {}
    return Session(
        user=user_from_payload(user_data),
        expires_at=session_data.get("expiresAt"),
        token=session_data.get("token") or data.get("token"),
    )
