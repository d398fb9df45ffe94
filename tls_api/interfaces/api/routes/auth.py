"""Endpoints for signing in to the admin dashboard."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from tls_api.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    record_login,
)
from tls_api.domain.entities import User
from tls_api.infrastructure.database import get_db
from tls_api.infrastructure.security import create_access_token, password_signature
from tls_api.interfaces.api.dependencies import get_current_active_user
from tls_api.interfaces.api.schemas import ApiResponse, Token, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate by email and password and return a bearer JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Rejected sign-in for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive",
        )

    access_token = create_access_token(
        data={
            "sub": user.email,
            "role": user.role.alias,
            "pwd_sig": password_signature(user.password, user.is_active),
        }
    )
    record_login(db, user.id)
    return Token(access_token=access_token, token_type="bearer", role=user.role.alias)


@router.get("/me", response_model=ApiResponse[UserRead], response_model_exclude_unset=True)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Return the signed-in user."""

    return ApiResponse(success=True, data=UserRead.model_validate(current_user))
