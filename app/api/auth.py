"""Login endpoint: maps the authentication outcome onto HTTP statuses."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.auth import LoginRequest, LoginResponse, MessageResponse
from app.services.authentication import AuthError, AuthenticationService
from app.services.user_store import SqlAlchemyUserStore

logger = logging.getLogger(__name__)
router = APIRouter()

# AuthError -> (HTTP status, client message). Unknown user and wrong password share one message.
AUTH_ERROR_RESPONSES: dict[AuthError, tuple[int, str]] = {
    AuthError.MISSING_CREDENTIALS: (status.HTTP_400_BAD_REQUEST, "Faltan credenciales"),
    AuthError.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Usuario o contraseña incorrectos",
    ),
    AuthError.INACTIVE_ACCOUNT: (status.HTTP_401_UNAUTHORIZED, "Usuario inactivo"),
    AuthError.UNAUTHORIZED_ROLE: (status.HTTP_403_FORBIDDEN, "Rol no autorizado"),
    AuthError.STORE_UNAVAILABLE: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Error interno del servidor",
    ),
}


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthenticationService:
    """Dependency: authentication service bound to this request's DB session."""
    return AuthenticationService(SqlAlchemyUserStore(db))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": MessageResponse},
        401: {"model": MessageResponse},
        403: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
def login(
    service: Annotated[AuthenticationService, Depends(get_auth_service)],
    body: LoginRequest | None = None,
) -> LoginResponse:
    """
    Authenticate with {usuario, password}; returns {usuario, rol} on success.
    The username is matched case-insensitively.
    """
    body = body or LoginRequest()
    logger.info(
        "Login request",
        extra={"usuario": body.usuario, "has_password": bool(body.password)},
    )

    result = service.authenticate(body.usuario, body.password)
    if result.error is not None:
        status_code, message = AUTH_ERROR_RESPONSES[result.error]
        logger.info("Login rejected", extra={"usuario": body.usuario, "reason": result.error.value})
        raise HTTPException(status_code=status_code, detail=message)

    logger.info("Login accepted", extra={"usuario": result.user.username, "rol": result.user.role})
    return LoginResponse(usuario=result.user.username, rol=result.user.role)
