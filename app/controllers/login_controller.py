"""Controller turning submitted login forms into dispatch outcomes."""

from __future__ import annotations

import logging
from typing import Optional

from app.dtos.auth_result import LoginOutcome
from app.dtos.credential_form import CredentialForm
from app.services.auth_service import AuthService


logger = logging.getLogger(__name__)


class LoginDispatcher:
    """Validate the incoming form, delegate to the service and map the result."""

    def __init__(self, auth_service: AuthService) -> None:
        """Persist the service used to authenticate forms."""

        self._auth_service = auth_service

    def dispatch(self, form: Optional[CredentialForm]) -> LoginOutcome:
        """Authenticate ``form`` and update the session only on success.

        A missing form short-circuits to ``INVALID`` without touching the service.
        ``ValueError`` raised by the service becomes ``ERROR``; the detail is only logged.
        """

        if form is None:
            return LoginOutcome.INVALID

        try:
            accepted = self._auth_service.login(form)
        except ValueError as exc:
            logger.warning("No fue posible validar el inicio de sesión: %s", exc)
            return LoginOutcome.ERROR

        if not accepted:
            logger.debug("Credenciales rechazadas para '%s'", form.username)
            return LoginOutcome.FAIL

        self._auth_service.set_current_user(form.username)
        return LoginOutcome.SUCCESS
