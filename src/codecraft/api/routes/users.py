"""User routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from codecraft.api.dependencies import StorageDep
from codecraft.api.schemas.users import LoginRequest, LoginResponse, UserInfoResponse
from codecraft.models import UserCreate
from codecraft.services.auth import USERNAME_TAKEN, authenticate_user, create_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserInfoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={400: {"description": "Invalid user data"}, 409: {"description": "Username taken"}},
)
def create_user_endpoint(data: UserCreate, storage: StorageDep) -> UserInfoResponse:
    user, error = create_user(storage, data.username, data.password)
    if user is None:
        raise HTTPException(
            status_code=(
                status.HTTP_409_CONFLICT if error == USERNAME_TAKEN else status.HTTP_400_BAD_REQUEST
            ),
            detail=error or "Invalid user data",
        )
    return UserInfoResponse.model_validate(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Check credentials",
    responses={401: {"description": "Invalid username or password"}},
)
def login(data: LoginRequest, storage: StorageDep) -> LoginResponse:
    ok, error = authenticate_user(storage, data.username, data.password)
    if not ok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error or "Invalid username or password.",
        )
    return LoginResponse(authenticated=True, username=data.username.strip())


@router.get(
    "/{username}",
    response_model=UserInfoResponse,
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
def get_user(username: str, storage: StorageDep) -> UserInfoResponse:
    user = storage.get_user_by_username(username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{username}' not found",
        )
    return UserInfoResponse.model_validate(user)
