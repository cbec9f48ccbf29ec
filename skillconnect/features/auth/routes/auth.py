from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError

from skillconnect.features.auth.dependencies import get_auth_service, get_user_repository
from skillconnect.features.auth.schemas.auth import SignupRequest, UsernameQuery
from skillconnect.features.auth.services.auth_service import AuthService
from skillconnect.features.auth.services.user_service import UserRepository
from skillconnect.platform.response import api_response

router = APIRouter(tags=["Authentication"])


@router.post(
    "/sign-up",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an unverified account and email it a verification code"
)
async def sign_up(
    request: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.register_user(request)

    return api_response(
        message="User registered successfully. Please verify your account.",
        status_code=status.HTTP_201_CREATED
    )


@router.get(
    "/check-username-unique",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Check username availability",
)
async def check_username_unique(
    user_name: str = Query(..., alias="userName"),
    users: UserRepository = Depends(get_user_repository),
):
    try:
        query = UsernameQuery(userName=user_name)
    except ValidationError as e:
        return api_response(
            message=e.errors()[0]["msg"].removeprefix("Value error, "),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    if await users.is_user_name_taken(query.user_name):
        return api_response(message="Username is already taken", success=False)

    return api_response(message="Username is available")
