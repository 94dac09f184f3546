"""Data transfer objects shared by the login layers."""

from app.dtos.auth_result import LoginOutcome
from app.dtos.credential_form import CredentialForm
from app.dtos.session_state import SessionState

__all__ = [
    "CredentialForm",
    "LoginOutcome",
    "SessionState",
]
