"""
Authentication endpoints for API v1.

``POST /auth/login`` exchanges an e‑mail and password for a bearer
token.  All other routes expect that token in the ``Authorization``
header.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from youth_ministry_api.app.core.security import create_access_token
from youth_ministry_api.app.core.store import DataStore, get_store
from youth_ministry_api.app.schemas.user import LoginRequest, LoginResponse
from youth_ministry_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, store: DataStore = Depends(get_store)) -> LoginResponse:
    """Authenticate a user and return an access token.

    Responds with HTTP 401 when the e‑mail is unknown or the password
    does not match.
    """
    user = await UserService.authenticate(store, credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token({"sub": user.email})
    return LoginResponse(access_token=token, token=token, user=user)
