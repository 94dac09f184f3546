"""Controller wiring the credential store, service and dispatcher together."""

from __future__ import annotations

import logging
from typing import Optional

from app.config.login_config import LoginConfiguration
from app.controllers.login_controller import LoginDispatcher
from app.daos.credential_dao import CredentialStore, InMemoryCredentialStore, SqlServerCredentialStore
from app.daos.database import DatabaseConnector
from app.dtos.session_state import SessionState
from app.services.auth_service import AuthService


class MainController:
    """Aggregate the login layers according to the active configuration."""

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        configuration: Optional[LoginConfiguration] = None,
        credential_store: Optional[CredentialStore] = None,
        session_state: Optional[SessionState] = None,
    ) -> None:
        """Bootstrap the service and expose the login dispatcher."""

        self._configuration = configuration or LoginConfiguration()
        store = credential_store if credential_store is not None else self._build_store()
        self.auth = AuthService(store, session_state)
        self.login = LoginDispatcher(self.auth)

    def _build_store(self) -> CredentialStore:
        """Pick the credential store variant named by the configuration."""

        if self._configuration.is_sqlserver_backend():
            connector = DatabaseConnector(configuration=self._configuration)
            return SqlServerCredentialStore(connector.connection_factory())
        backend = self._configuration.get_backend()
        if backend != LoginConfiguration.MEMORY_BACKEND:
            self._logger.warning("Backend de credenciales desconocido '%s'; se usará memoria.", backend)
        return InMemoryCredentialStore.from_pairs(self._configuration.get_users())
