"""
Account API endpoints.

Registration, login/logout and the current user's profile.
Success responses without a body are plain 200s.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from api.dependencies import get_account_service
from api.middleware.auth import AuthError, get_current_user, session_key_scheme
from api.models.errors import DetailResponse
from modules.auth.exceptions import UserNotFoundError
from shared.models import AuthenticatedUser

from .exceptions import (
    EmailAlreadyRegisteredError,
    EmptyUpdateError,
    InvalidCredentialsError,
    MissingFieldsError,
)
from .interfaces import IAccountService
from .models import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserProfileResponse,
)

router = APIRouter()


@router.post(
    "/register",
    response_class=Response,
    responses={400: {"model": DetailResponse}, 409: {"model": DetailResponse}},
)
async def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> Response:
    """Register a new user."""
    try:
        await service.register(request)
    except MissingFieldsError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": DetailResponse}, 404: {"model": DetailResponse}},
)
async def login(
    request: LoginRequest,
    service: IAccountService = Depends(get_account_service),
) -> LoginResponse:
    """
    Log in with email and password.

    An unknown email and a wrong password both answer 404.
    """
    try:
        session = await service.login(request)
    except MissingFieldsError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return LoginResponse(session_key=session.session_key)


@router.post("/logout", response_class=Response)
async def logout(
    session_key: Optional[str] = Depends(session_key_scheme),
    service: IAccountService = Depends(get_account_service),
) -> Response:
    """Log out. Succeeds with or without a valid Session-Key."""
    await service.logout(session_key)
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/user",
    response_model=UserProfileResponse,
    responses={401: {"model": DetailResponse}},
)
async def get_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> UserProfileResponse:
    """Get the logged-in user's profile."""
    try:
        return await service.get_profile(user.id)
    except UserNotFoundError:
        raise AuthError("User does not exist")


@router.patch(
    "/user",
    response_class=Response,
    responses={
        400: {"model": DetailResponse},
        401: {"model": DetailResponse},
        409: {"model": DetailResponse},
    },
)
async def update_user(
    request: Optional[UpdateProfileRequest] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> Response:
    """Modify the logged-in user's name, email and/or password."""
    try:
        await service.update_profile(user.id, request)
    except UserNotFoundError:
        raise AuthError("User does not exist")
    except EmptyUpdateError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return Response(status_code=status.HTTP_200_OK)
