"""
Authentication API endpoints.

Register, login, logout and session status. Successful register/login
set the session cookie; logout destroys the session and clears it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_session_service, get_user_service
from api.middleware.auth import (
    clear_session_cookie,
    get_optional_identity,
    get_session_token,
    set_session_cookie,
)
from api.models.errors import AUTH_RESPONSES, VALIDATION_RESPONSES
from modules.users.interfaces import IUserService
from modules.users.models import AuthStatusResponse, LoginRequest, RegisterRequest
from shared.models import Identity, MessageResponse

from .interfaces import ISessionService

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=201,
    responses=VALIDATION_RESPONSES,
)
async def register(
    body: RegisterRequest,
    response: Response,
    users: IUserService = Depends(get_user_service),
    sessions: ISessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Create an account and log it in.
    """
    user = await users.register(body)
    token = await sessions.create_session(user.id, user.role)
    set_session_cookie(response, token)
    return MessageResponse(message="User registered")


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={**VALIDATION_RESPONSES, **AUTH_RESPONSES},
)
async def login(
    body: LoginRequest,
    response: Response,
    users: IUserService = Depends(get_user_service),
    sessions: ISessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Exchange email and password for a session cookie.
    """
    user = await users.authenticate(body)
    token = await sessions.create_session(user.id, user.role)
    set_session_cookie(response, token)
    return MessageResponse(message="Logged in successfully")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: ISessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Destroy the current session. Safe to call without one.
    """
    await sessions.destroy_session(token)
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/status",
    response_model=AuthStatusResponse,
    response_model_exclude_unset=True,
)
async def status(
    identity: Optional[Identity] = Depends(get_optional_identity),
    users: IUserService = Depends(get_user_service),
) -> AuthStatusResponse:
    """
    Report whether the caller has a session, and who they are.
    """
    return await users.get_status(identity)
