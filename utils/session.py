# utils/session.py
from typing import Optional

from fastapi import Depends, Header, HTTPException

from models.auth_schemas import Identity
from services.auth_service import AuthService, get_auth_service
from services.errors import AuthenticationRequiredError, FitTrackError

def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the token out of an "Authorization: Bearer <token>" header"""
    if not authorization:
        return None

    scheme, _, token = authorization.strip().partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()

async def get_access_token(authorization: Optional[str] = Header(None)) -> str:
    """FastAPI dependency returning the caller's access token or a 401"""
    token = extract_bearer_token(authorization)
    if not token:
        error = AuthenticationRequiredError()
        raise HTTPException(status_code=error.status_code, detail=error.to_detail())
    return token

async def get_current_identity(
    access_token: str = Depends(get_access_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Identity:
    """
    Session guard for every workflow.
    Resolves the bearer token to the signed-in identity; anything else is
    a 401 pointing the client at the login workflow.
    """
    try:
        identity = await auth_service.get_current_identity(access_token)
    except FitTrackError as e:
        print(f"❌ Session check failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())

    if identity is None:
        error = AuthenticationRequiredError()
        raise HTTPException(status_code=error.status_code, detail=error.to_detail())

    return identity
