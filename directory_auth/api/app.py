"""
HTTP surface for directory-auth.

Routes:
- POST /auth/login: identifier + password -> signed token
- GET /auth/validate-token: bearer token -> subject and role
- POST /auth/logout: bearer token -> revoked

Run with:
    uvicorn directory_auth.api.app:create_app --factory
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from directory_auth import __version__
from directory_auth.adapters import (
    HTTPDirectoryAdapter,
    JWTTokenCodec,
    MemoryRevocationStore,
    extract_bearer_token,
)
from directory_auth.config import AuthSettings
from directory_auth.domain.credential import Credential
from directory_auth.domain.errors import INVALID_TOKEN, REVOKED_TOKEN, TokenFailure
from directory_auth.domain.token import TokenClaims
from directory_auth.logging import configure_logging, get_logger
from directory_auth.sdk.client import SessionClient

log = get_logger(__name__)

LOGOUT_OK = "Session closed."
MISSING_TOKEN_ID = "Token does not carry a unique identifier."


class LoginRequest(BaseModel):
    identifier: str = Field(..., min_length=1, description="Email or username")
    password: str = Field(..., min_length=1)


def build_client(settings: AuthSettings) -> SessionClient:
    """Wire the default adapters from settings."""
    return SessionClient(
        directory=HTTPDirectoryAdapter(
            settings.directory_url,
            credentials_path=settings.credentials_path,
            timeout=settings.directory_timeout,
        ),
        codec=JWTTokenCodec(
            secret=settings.jwt_secret,
            lifetime_minutes=settings.token_lifetime_minutes,
            default_role=settings.default_role,
        ),
        revocations=MemoryRevocationStore(),
    )


def bearer_token(request: Request) -> str:
    token = extract_bearer_token(request.headers)
    if token is None:
        raise HTTPException(status_code=401, detail=INVALID_TOKEN)
    return token


def create_app(
    settings: Optional[AuthSettings] = None,
    client: Optional[SessionClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Loaded from the environment when omitted
        client: Prewired session client (tests); built from settings otherwise

    Raises:
        ConfigurationError: If settings are needed and incomplete
    """
    owns_client = client is None

    if client is None:
        settings = settings or AuthSettings.from_env()
        configure_logging(settings.log_level, json_output=settings.log_json)
        client = build_client(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_client:
            client.close()
            log.info("directory_client_closed")

    app = FastAPI(title="directory-auth", version=__version__, lifespan=lifespan)
    app.state.session_client = client

    def verified_claims(token: str = Depends(bearer_token)) -> TokenClaims:
        result = client.verify(token)
        if not result.ok:
            raise HTTPException(status_code=401, detail=INVALID_TOKEN)
        return result.claims

    @app.post("/auth/login")
    def login(body: LoginRequest):
        outcome = client.login(Credential(body.identifier, body.password))
        if not outcome.succeeded:
            raise HTTPException(status_code=401, detail=outcome.reason)
        return outcome.to_dict()

    @app.get("/auth/validate-token")
    def validate_token(token: str = Depends(bearer_token)):
        result = client.authorize(token)
        if not result.ok:
            detail = REVOKED_TOKEN if result.failure is TokenFailure.REVOKED else INVALID_TOKEN
            raise HTTPException(status_code=401, detail=detail)
        return {"subject": result.claims.subject, "role": result.claims.role}

    @app.post("/auth/logout")
    def logout(claims: TokenClaims = Depends(verified_claims)):
        if claims.token_id is None:
            raise HTTPException(status_code=400, detail=MISSING_TOKEN_ID)
        client.logout(claims)
        return {"detail": LOGOUT_OK}

    return app
