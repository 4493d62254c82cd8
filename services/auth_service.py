# services/auth_service.py
import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

from supabase import create_client, Client, AuthApiError, AuthError

from models.auth_schemas import AuthSession, Identity
from services.errors import (
    AuthenticationRejectedError,
    EmailNotConfirmedError,
    classify_backend_error,
)

PENDING_VERIFICATION_MESSAGE = (
    "Sign-up successful! Please check your email and click the verification link."
)

@dataclass
class AuthResult:
    status: str
    identity: Optional[Identity] = None
    session: Optional[AuthSession] = None
    message: Optional[str] = None

def _is_email_not_confirmed(error: AuthError) -> bool:
    code = getattr(error, 'code', None)
    if code == 'email_not_confirmed':
        return True
    message = getattr(error, 'message', '') or ''
    return 'Email not confirmed' in message or 'email_not_confirmed' in message

def _to_identity(user: Any) -> Optional[Identity]:
    if user is None:
        return None
    return Identity(id=str(user.id), email=getattr(user, 'email', None))

def _to_session(session: Any) -> Optional[AuthSession]:
    if session is None:
        return None
    return AuthSession(
        access_token=session.access_token,
        refresh_token=getattr(session, 'refresh_token', None),
        expires_in=getattr(session, 'expires_in', None),
        token_type=getattr(session, 'token_type', None) or "bearer"
    )

class AuthService:
    """Thin wrapper over the Supabase identity service.

    Sign-up and sign-in run on a fresh client each time so the session a
    caller receives is never stored on a client shared with other callers.
    """

    def __init__(self, client_factory: Optional[Callable[[], Client]] = None):
        if client_factory is None:
            url = os.getenv("SUPABASE_URL")
            key = os.getenv("SUPABASE_ANON_KEY") or os.getenv("SUPABASE_SERVICE_KEY")

            if not url or not key:
                raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY (or SUPABASE_SERVICE_KEY) must be set in environment variables")

            def client_factory() -> Client:
                return create_client(url, key)

        self.client_factory = client_factory

    async def get_current_identity(self, access_token: str) -> Optional[Identity]:
        """Resolve an access token to its identity, None when it is not valid"""
        try:
            response = self.client_factory().auth.get_user(access_token)
        except AuthApiError as e:
            print(f"⚠️ Access token rejected: {e.message}")
            return None
        except Exception as e:
            print(f"❌ Error checking session: {e}")
            raise classify_backend_error(e, "Failed to check login status") from e

        if response is None:
            return None
        return _to_identity(response.user)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """Register a new account"""
        try:
            print(f"🔍 Registering user: {email}")
            response = self.client_factory().auth.sign_up({
                "email": email,
                "password": password
            })
        except AuthApiError as e:
            print(f"❌ Sign-up rejected for {email}: {e.message}")
            raise AuthenticationRejectedError(e.message or "Sign-up failed, please try again") from e
        except Exception as e:
            print(f"❌ Error registering user: {e}")
            raise classify_backend_error(e, "Sign-up failed, please try again") from e

        identity = _to_identity(response.user)

        # Projects with email confirmation return the user without a session
        if response.user is not None and response.session is None:
            print(f"📧 Verification email sent to: {email}")
            return AuthResult(
                status="pending_verification",
                identity=identity,
                message=PENDING_VERIFICATION_MESSAGE
            )

        print(f"✅ User registered and signed in: {email}")
        return AuthResult(
            status="authenticated",
            identity=identity,
            session=_to_session(response.session),
            message="Sign-up successful!"
        )

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password"""
        try:
            print(f"🔐 Login attempt for: {email}")
            response = self.client_factory().auth.sign_in_with_password({
                "email": email,
                "password": password
            })
        except AuthApiError as e:
            if _is_email_not_confirmed(e):
                print(f"❌ Email not confirmed for: {email}")
                raise EmailNotConfirmedError() from e
            print(f"❌ Login rejected for {email}: {e.message}")
            raise AuthenticationRejectedError(e.message or "Login failed, please try again") from e
        except Exception as e:
            print(f"❌ Login error: {e}")
            raise classify_backend_error(e, "Login failed, please try again") from e

        print(f"✅ Login successful for: {email}")
        return AuthResult(
            status="authenticated",
            identity=_to_identity(response.user),
            session=_to_session(response.session),
            message="Login successful"
        )

    async def sign_out(self, access_token: str) -> None:
        """Revoke the caller's session"""
        try:
            self.client_factory().auth.admin.sign_out(access_token)
            print("✅ Signed out")
        except Exception as e:
            print(f"❌ Sign-out error: {e}")
            raise classify_backend_error(e, "Sign-out failed") from e

# Global instance - initialized in main.py, injected into routes with Depends
auth_service = None

def get_auth_service() -> AuthService:
    """Get the global auth service instance"""
    global auth_service
    if auth_service is None:
        auth_service = AuthService()
    return auth_service

def init_auth_service():
    """Initialize the global auth service"""
    global auth_service
    auth_service = AuthService()
    return auth_service
