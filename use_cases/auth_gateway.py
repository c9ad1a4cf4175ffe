"""Auth gateway contract: the async operations the dashboard consumes."""

from dataclasses import dataclass
from typing import Optional, Protocol, Union

from use_cases.session_models import Provider, Session

GENERIC_ERROR_MESSAGE = "Something went wrong"


class AuthGatewayError(Exception):
    """Remote authentication failure (bad credentials, provider denial, network)."""

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass(frozen=True)
class AuthSuccess:
    session: Optional[Session] = None


@dataclass(frozen=True)
class AuthFailure:
    message: str = GENERIC_ERROR_MESSAGE
    code: Optional[str] = None
    status: Optional[int] = None

    def raise_for_failure(self) -> None:
        raise AuthGatewayError(self.message, code=self.code)


@dataclass(frozen=True)
class AuthRedirect:
    """The provider flow continues outside the application."""

    url: str


SignInResult = Union[AuthSuccess, AuthFailure]
SocialSignInResult = Union[AuthSuccess, AuthFailure, AuthRedirect]
SignOutResult = Union[AuthSuccess, AuthFailure]


class AuthGateway(Protocol):
    async def fetch_session(self) -> Optional[Session]:
        ...

    async def sign_in_with_credentials(self, email: str, password: str) -> SignInResult:
        ...

    async def sign_in_with_provider(self, provider: Provider) -> SocialSignInResult:
        ...

    async def sign_up(self, name: str, email: str, password: str) -> SignInResult:
        ...

    async def sign_out(self) -> SignOutResult:
        ...


def failure_message(result: AuthFailure) -> str:
    return (result.message or "").strip() or GENERIC_ERROR_MESSAGE
