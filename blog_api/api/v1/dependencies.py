# Standard library imports
import base64
from typing import Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

# Local application imports
from ...application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.exceptions import AuthenticationError
from ...di.base_container import BaseContainer


class Utf8HTTPBasic(HTTPBasic):
    """
    HTTP Basic scheme that decodes credentials as UTF-8

    FastAPI's HTTPBasic decodes as ASCII, which locks out any account
    registered with a non-ASCII username or password. Malformed headers raise
    AuthenticationError so they get the same 401 body as bad credentials.
    """

    async def __call__(self, request: Request) -> Optional[HTTPBasicCredentials]:
        authorization = request.headers.get("Authorization")
        scheme, param = get_authorization_scheme_param(authorization)
        if not authorization or scheme.lower() != "basic":
            if self.auto_error:
                raise AuthenticationError("Authentication required")
            return None

        try:
            decoded = base64.b64decode(param, validate=True).decode("utf-8")
        except ValueError as e:
            # binascii.Error and UnicodeDecodeError are both ValueErrors
            raise AuthenticationError("Invalid authentication credentials") from e

        user_name, separator, password = decoded.partition(":")
        if not separator:
            raise AuthenticationError("Invalid authentication credentials")
        return HTTPBasicCredentials(username=user_name, password=password)


# auto_error=False so a missing header goes through the same error path as
# bad credentials.
security_scheme = Utf8HTTPBasic(auto_error=False)


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at application startup

    Raises:
        RuntimeError: If the application lifespan has not run
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application container is not initialised")
    return container


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(security_scheme),
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    FastAPI dependency that authenticates the request with HTTP Basic credentials

    Every request re-authenticates; nothing is cached between requests. On
    success the user is also attached to `request.state.user`.

    Args:
        request: Incoming request
        credentials: Parsed Basic credentials, None when the header is absent
        container: Application DI container

    Returns:
        UserResponse for the authenticated user

    Raises:
        AuthenticationError: If credentials are missing or incorrect
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")

    authenticate_use_case = container.get(AuthenticateUserUseCase)
    user = await authenticate_use_case.execute(credentials.username, credentials.password)
    request.state.user = user
    return user
