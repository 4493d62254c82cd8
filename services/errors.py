# services/errors.py
from typing import Any, Dict, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AuthApiError, AuthError, AuthRetryableError

CONNECTIVITY_MESSAGE = "Network connection failed, please check your network and try again"
LOGIN_URL = "/api/auth/login"


class FitTrackError(Exception):
    """Base error carrying a user-facing message and an HTTP mapping"""

    status_code = 500
    kind = "error"
    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "kind": self.kind,
            "retryable": self.retryable,
        }


class InputValidationError(FitTrackError):
    status_code = 400
    kind = "validation"


class AuthenticationRequiredError(FitTrackError):
    status_code = 401
    kind = "authentication_required"

    def __init__(self, message: str = "Please sign in first"):
        super().__init__(message)

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["login_url"] = LOGIN_URL
        return detail


class AuthenticationRejectedError(FitTrackError):
    status_code = 401
    kind = "authentication_rejected"


class EmailNotConfirmedError(AuthenticationRejectedError):
    kind = "email_not_confirmed"

    def __init__(self, message: str = (
        "Email not verified. Please check your inbox and click the verification link."
    )):
        super().__init__(message)


class NotFoundError(FitTrackError):
    status_code = 404
    kind = "not_found"


class ConnectivityError(FitTrackError):
    status_code = 503
    kind = "connectivity"
    retryable = True

    def __init__(self, message: str = CONNECTIVITY_MESSAGE):
        super().__init__(message)


class BackendError(FitTrackError):
    status_code = 502
    kind = "backend"
    retryable = True


def classify_backend_error(exc: Exception, fallback: Optional[str] = None) -> FitTrackError:
    """Map an exception raised by the Supabase client to a FitTrackError.

    Classification goes by exception type only. Transport failures (DNS,
    refused connections, timeouts) become ConnectivityError; errors the
    backend answered with keep their message as a BackendError.
    """
    if isinstance(exc, FitTrackError):
        return exc

    if isinstance(exc, (httpx.TransportError, AuthRetryableError)):
        return ConnectivityError()

    if isinstance(exc, APIError):
        return BackendError(exc.message or fallback or str(exc))

    if isinstance(exc, (AuthApiError, AuthError)):
        return BackendError(exc.message or fallback or str(exc))

    return BackendError(fallback or str(exc))
