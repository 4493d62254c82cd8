# api/auth.py
from fastapi import APIRouter, HTTPException, Depends

from models.auth_schemas import AuthResponse, Credentials, Identity
from services.auth_service import AuthService, AuthResult, get_auth_service
from services.errors import FitTrackError
from utils.session import get_access_token, get_current_identity
from utils.validation import validate_credentials

router = APIRouter()

def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        success=True,
        status=result.status,
        user=result.identity,
        session=result.session,
        message=result.message
    )

@router.post("/signup", response_model=AuthResponse)
async def sign_up(credentials: Credentials, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new account; may end in pending email verification"""
    try:
        validate_credentials(credentials.email, credentials.password, sign_up=True)
        result = await auth_service.sign_up(credentials.email.strip(), credentials.password)
        return _auth_response(result)

    except FitTrackError as e:
        print(f"❌ Sign-up failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error registering user: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/login", response_model=AuthResponse)
async def sign_in(credentials: Credentials, auth_service: AuthService = Depends(get_auth_service)):
    """Sign in with email and password"""
    try:
        validate_credentials(credentials.email, credentials.password)
        result = await auth_service.sign_in(credentials.email.strip(), credentials.password)
        return _auth_response(result)

    except FitTrackError as e:
        print(f"❌ Login failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Login error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/logout")
async def sign_out(
    access_token: str = Depends(get_access_token),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Sign out the caller"""
    try:
        await auth_service.sign_out(access_token)
        return {"success": True, "message": "Signed out"}

    except FitTrackError as e:
        print(f"❌ Sign-out failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Sign-out error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/me")
async def get_me(identity: Identity = Depends(get_current_identity)):
    """Current signed-in identity"""
    return {"success": True, "user": identity}
