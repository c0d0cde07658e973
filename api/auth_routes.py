"""Authentication routes: registration, login and profile."""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_current_user, get_user_service
from schemas.user import CurrentUser, LoginRequest, RegisterRequest, TokenResponse, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, service: UserService = Depends(get_user_service)):
    """Create a user account."""
    return await service.register(body.email, body.password)


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, service: UserService = Depends(get_user_service)):
    """Exchange email and password for a bearer token."""
    return await service.login(body.email, body.password)


@router.get("/profile")
async def profile(current_user: CurrentUser = Depends(get_current_user)):
    """Claims of the authenticated caller."""
    return current_user.model_dump(by_alias=True, mode="json")
