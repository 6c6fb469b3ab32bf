"""Current user services: static identity and request-bound identity.

Tests cover:
    - StaticCurrentUserService authenticated/anonymous states
    - RequestCurrentUserService reading AuthenticationMiddleware's user
    - Anonymous requests and apps without the middleware
"""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from starlette.authentication import AuthCredentials, AuthenticationBackend, SimpleUser
from starlette.middleware.authentication import AuthenticationMiddleware

from buildingblocks.services.current_user_service import (
    StaticCurrentUserService,
    get_current_user_service,
)
from buildingblocks.services.interfaces import ICurrentUserService


class HeaderBackend(AuthenticationBackend):
    """Treats the X-Test-User header as an already verified identity."""

    async def authenticate(self, conn):
        username = conn.headers.get("X-Test-User")
        if not username:
            return None
        return AuthCredentials(["authenticated"]), SimpleUser(username)


def _build_app(with_auth: bool) -> FastAPI:
    app = FastAPI()
    if with_auth:
        app.add_middleware(AuthenticationMiddleware, backend=HeaderBackend())

    @app.get("/me")
    def me(user: ICurrentUserService = Depends(get_current_user_service)):
        return {"user_id": user.user_id, "is_authenticated": user.is_authenticated}

    return app


def test_static_user_is_authenticated():
    user = StaticCurrentUserService("svc-importer")
    assert user.user_id == "svc-importer"
    assert user.is_authenticated


def test_static_user_without_id_is_anonymous():
    user = StaticCurrentUserService()
    assert user.user_id is None
    assert not user.is_authenticated


def test_request_user_from_authentication_middleware():
    client = TestClient(_build_app(with_auth=True))
    response = client.get("/me", headers={"X-Test-User": "alice"})
    assert response.status_code == 200
    assert response.json() == {"user_id": "alice", "is_authenticated": True}


def test_unauthenticated_request_is_anonymous():
    client = TestClient(_build_app(with_auth=True))
    response = client.get("/me")
    assert response.json() == {"user_id": None, "is_authenticated": False}


def test_request_without_middleware_is_anonymous():
    client = TestClient(_build_app(with_auth=False))
    response = client.get("/me", headers={"X-Test-User": "alice"})
    assert response.json() == {"user_id": None, "is_authenticated": False}
