"""
Authentication flows module.

Login, signup and password change against the backend's /auth endpoints.

Public API:
- IAuthService: Interface for the flows
- AuthService: httpx-backed implementation
- LoginForm, SignupForm, ChangePasswordForm: Form state for a renderer
- SIGNUP_RULES, SIGNUP_HINTS, check_signup: Advertised signup constraints
"""

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, PasswordChangeRequest, SignupRequest
from .service import AuthService, PASSWORD_UPDATED
from .forms import ChangePasswordForm, LoginForm, SignupForm
from .validation import SIGNUP_HINTS, SIGNUP_RULES, SignupRule, check_signup

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthResponse",
    "LoginRequest",
    "PasswordChangeRequest",
    "SignupRequest",
    # Service
    "AuthService",
    "PASSWORD_UPDATED",
    # Forms
    "ChangePasswordForm",
    "LoginForm",
    "SignupForm",
    # Validation
    "SIGNUP_HINTS",
    "SIGNUP_RULES",
    "SignupRule",
    "check_signup",
]
