"""
Current User Services

ICurrentUserService implementations for a fixed identity and for identities
resolved by Starlette's AuthenticationMiddleware on a FastAPI request.
"""

from typing import Optional

from fastapi import Request

from ..utils.logging_utils import get_logger
from .interfaces import ICurrentUserService


class StaticCurrentUserService(ICurrentUserService):
    """
    Fixed identity, for background jobs, scripts and tests.

    Anonymous when constructed without a user id.
    """

    def __init__(self, user_id: Optional[str] = None):
        self._user_id = user_id

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def is_authenticated(self) -> bool:
        return self._user_id is not None


class RequestCurrentUserService(ICurrentUserService):
    """
    Identity of the user behind an HTTP request.

    Reads the user that AuthenticationMiddleware stores in the request scope
    (a starlette.authentication.BaseUser). Without the middleware, or for an
    unauthenticated user, the request is treated as anonymous.
    """

    def __init__(self, request: Request):
        """
        Args:
            request: Incoming FastAPI request
        """
        self._request = request

    def _user(self):
        user = self._request.scope.get("user")
        if user is None or not getattr(user, "is_authenticated", False):
            return None
        return user

    @property
    def user_id(self) -> Optional[str]:
        user = self._user()
        if user is None:
            return None
        # SimpleUser only implements display_name
        try:
            identity = user.identity
        except NotImplementedError:
            identity = user.display_name
        return identity or None

    @property
    def is_authenticated(self) -> bool:
        return self._user() is not None


_logger = get_logger(RequestCurrentUserService)


def get_current_user_service(request: Request) -> ICurrentUserService:
    """
    Factory function for FastAPI dependencies.

    Example:
        @app.get("/me")
        def me(user: ICurrentUserService = Depends(get_current_user_service)):
            return {"user_id": user.user_id}

    Args:
        request: Incoming request (injected)

    Returns:
        ICurrentUserService bound to the request
    """
    service = RequestCurrentUserService(request)
    _logger.trace("Resolved current user %s for %s", service.user_id, request.url.path)
    return service
