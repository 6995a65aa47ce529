from fastapi import APIRouter, Depends, status

from car_store.entrypoints.http.auth import current_user_id
from car_store.entrypoints.http.dependencies import (
    get_login_user_use_case,
    get_profile_use_case,
    get_register_user_use_case,
    get_update_profile_use_case,
)
from car_store.entrypoints.http.dtos.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    ProfileUpdateRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from car_store.entrypoints.http.error_responses import error_responses
from car_store.entrypoints.http.mappers.auth_mapper import AuthMapper
from car_store.use_cases.auth import GetProfile, LoginUser, RegisterUser, UpdateProfile


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=AuthResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    description="""
    Register a new user and return a session token.

    ## Rules
    - email, username and password are required
    - password: at least 6 characters
    - email and username must both be unused (409 otherwise)
    """,
    responses=error_responses(400, 409),
)
def register(
    body: RegisterRequestDTO,
    use_case: RegisterUser = Depends(get_register_user_use_case),
) -> AuthResponseDTO:
    result = use_case.execute(AuthMapper.to_registration(body))
    return AuthMapper.to_auth_response(result)


@router.post(
    "/login",
    response_model=AuthResponseDTO,
    summary="Sign in by username",
    description="""
    Exchange username and password for a session token.

    Unknown usernames and wrong passwords get the same 401 response.
    """,
    responses=error_responses(400, 401),
)
def login(
    body: LoginRequestDTO,
    use_case: LoginUser = Depends(get_login_user_use_case),
) -> AuthResponseDTO:
    result = use_case.execute(body.username.strip(), body.password)
    return AuthMapper.to_auth_response(result)


@router.get(
    "/profile",
    response_model=UserResponseDTO,
    summary="Current user's profile",
    responses=error_responses(401, 404),
)
def get_profile(
    user_id: str = Depends(current_user_id),
    use_case: GetProfile = Depends(get_profile_use_case),
) -> UserResponseDTO:
    return AuthMapper.to_user_response(use_case.execute(user_id))


@router.put(
    "/profile",
    response_model=UserResponseDTO,
    summary="Update the current user's profile",
    description="Overwrites username, email, first/last name and phone.",
    responses=error_responses(400, 401, 404, 409),
)
def update_profile(
    body: ProfileUpdateRequestDTO,
    user_id: str = Depends(current_user_id),
    use_case: UpdateProfile = Depends(get_update_profile_use_case),
) -> UserResponseDTO:
    user = use_case.execute(user_id, AuthMapper.to_profile_update(body))
    return AuthMapper.to_user_response(user)
