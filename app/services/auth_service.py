"""Business logic deciding whether a submitted login form is accepted."""

import logging
from typing import Callable, Optional

from app.daos.credential_dao import LOOKUP_RECOGNIZED, CredentialStore
from app.dtos.credential_form import CredentialForm
from app.dtos.session_state import SessionState


logger = logging.getLogger(__name__)


def is_recognized(code: int) -> bool:
    """Translate a credential store lookup code into an accept/reject decision."""
    return code == LOOKUP_RECOGNIZED


class AuthService:
    """Validate forms against a credential store and own the session's current user."""

    def __init__(
        self,
        credential_store: CredentialStore,
        session_state: Optional[SessionState] = None,
        decision: Callable[[int], bool] = is_recognized,
    ) -> None:
        """Store the collaborators; a fresh session is created when none is given."""
        self._credential_store = credential_store
        self._session_state = session_state if session_state is not None else SessionState()
        self._decision = decision

    def login(self, form: CredentialForm) -> bool:
        """Return whether the form's credentials are recognized.

        Raises:
            ValueError: when the form is missing or carries no usable username.
        """
        if form is None:
            raise ValueError("Se requiere un formulario de credenciales.")
        username = form.username
        if not isinstance(username, str) or not username.strip():
            raise ValueError("El formulario no contiene un nombre de usuario válido.")

        code = self._credential_store.lookup(form)
        logger.debug("Resultado de la consulta para '%s': %s", username, code)
        return self._decision(code)

    def set_current_user(self, username: str) -> None:
        """Overwrite the session's current user."""
        with self._session_state.lock:
            self._session_state.current_user = username
        logger.info("Sesión actualizada para el usuario '%s'", username)

    def get_current_user(self) -> Optional[str]:
        """Return the username stored in the session, if any."""
        return self._session_state.current_user
