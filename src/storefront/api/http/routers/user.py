"""User API router: login, registration and lookup."""

from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.api.http.deps import get_user_service
from storefront.core.services import UserService
from storefront.entities.user import LoginRequest, RegisterRequest, User

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/login", response_model=User)
def login(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> User:
    """Return the stored user whose username and password match exactly."""
    user = service.login(credentials.username, credentials.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return user


@router.post("/register", response_class=Response)
def register(
    payload: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Create an account. Usernames are not checked for duplicates."""
    service.register(payload.username, payload.password, payload.email)
    return Response(status_code=200)


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> User:
    """Get a user by ID."""
    user = service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
