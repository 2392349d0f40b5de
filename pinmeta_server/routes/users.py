"""
Signup, login, logout, and current user. Plaintext credentials; no security model.

The session is a single server-wide pointer: every client sees the same
logged-in user until someone logs in as another account or logs out.
"""

from fastapi import APIRouter, HTTPException

from ..errors import AuthenticationError
from ..models import LoginRequest, SignupRequest, UserResponse
from ..state import get_state

router = APIRouter()


@router.post("/signup", response_model=UserResponse)
def signup(request: SignupRequest):
    """Create an account and make it the current session user."""
    user = get_state().backend.signup(request.username, request.email, request.password)
    return UserResponse(**user.public_dict())


@router.post("/login", response_model=UserResponse)
def login(request: LoginRequest):
    user = get_state().backend.login(request.email, request.password)
    if user is None:
        raise AuthenticationError("Invalid email or password")
    return UserResponse(**user.public_dict())


@router.post("/logout")
def logout():
    get_state().backend.logout()
    return {"logged_out": True}


@router.get("/me", response_model=UserResponse)
def me():
    user = get_state().backend.get_current_user()
    if user is None:
        raise HTTPException(status_code=404, detail="No user logged in")
    return UserResponse(**user.public_dict())
