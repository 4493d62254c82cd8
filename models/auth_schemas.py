# models/auth_schemas.py
from pydantic import BaseModel
from typing import Optional

class Identity(BaseModel):
    """Authenticated principal issued by the identity service"""
    id: str
    email: Optional[str] = None

class Credentials(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class AuthSession(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: str = "bearer"

class AuthResponse(BaseModel):
    success: bool
    status: str
    user: Optional[Identity] = None
    session: Optional[AuthSession] = None
    message: Optional[str] = None
