"""Data access objects answering whether a submitted form matches a known user."""

from __future__ import annotations

import importlib
import logging
from contextlib import closing
from typing import TYPE_CHECKING, Callable, Dict, Mapping, Optional, Protocol, Tuple, Type

if TYPE_CHECKING:  # pragma: no cover - solo para tipado
    import pymssql

from app.daos.database import DatabaseConnectorError
from app.dtos.credential_form import CredentialForm


logger = logging.getLogger(__name__)

LOOKUP_RECOGNIZED = 1
LOOKUP_NOT_RECOGNIZED = 0


class CredentialStore(Protocol):
    """Anything able to resolve a credential form into a lookup code."""

    def lookup(self, form: CredentialForm) -> int:
        ...


def _normalized_username(form: CredentialForm) -> Optional[str]:
    """Return the stripped username or ``None`` when it cannot be looked up."""
    username = form.username
    if not isinstance(username, str) or not username.strip():
        return None
    return username.strip()


class InMemoryCredentialStore:
    """Resolve credentials against a fixed ``username -> password`` mapping.

    A ``None`` password registers the user without checking the submitted password.
    """

    def __init__(self, records: Optional[Mapping[str, Optional[str]]] = None) -> None:
        """Copy the records so later changes to the source mapping are not seen."""
        self._records: Dict[str, Optional[str]] = dict(records or {})

    @classmethod
    def from_pairs(cls, raw: str) -> "InMemoryCredentialStore":
        """Build a store from a ``user[:password],other`` string."""

        records: Dict[str, Optional[str]] = {}
        for chunk in raw.split(","):
            entry = chunk.strip()
            if not entry:
                continue
            username, separator, password = entry.partition(":")
            username = username.strip()
            if not username:
                continue
            records[username] = password if separator else None
        return cls(records)

    def lookup(self, form: CredentialForm) -> int:
        """Return ``1`` for a known user whose registered password, if any, matches."""
        username = _normalized_username(form)
        if username is None or username not in self._records:
            return LOOKUP_NOT_RECOGNIZED
        expected = self._records[username]
        if expected is not None and form.password != expected:
            return LOOKUP_NOT_RECOGNIZED
        return LOOKUP_RECOGNIZED


class SqlServerCredentialStore:
    """Check the SQL Server users table for an active account with the submitted name."""

    QUERY = "SELECT TOP 1 username FROM dbo.users WHERE username = %s AND active = 1"

    def __init__(self, connection_factory: Callable[[], "pymssql.Connection"]) -> None:
        """Store the connection factory for later usage."""
        self._connection_factory = connection_factory

    def lookup(self, form: CredentialForm) -> int:
        """Return ``1`` when an active row exists; failures resolve to a miss."""
        username = _normalized_username(form)
        if username is None:
            return LOOKUP_NOT_RECOGNIZED

        error_types: Tuple[Type[BaseException], ...] = (DatabaseConnectorError,)
        try:
            pymssql = importlib.import_module("pymssql")
        except ModuleNotFoundError:
            pymssql = None
        else:
            error_types = (DatabaseConnectorError, pymssql.Error)

        try:
            with closing(self._connection_factory()) as connection:
                with closing(connection.cursor(as_dict=True)) as cursor:
                    cursor.execute(self.QUERY, (username,))
                    row = cursor.fetchone()
        except error_types as exc:
            logger.error("No fue posible consultar las credenciales de '%s': %s", username, exc)
            return LOOKUP_NOT_RECOGNIZED

        code = LOOKUP_RECOGNIZED if row else LOOKUP_NOT_RECOGNIZED
        logger.debug("Consulta de credenciales para '%s' resuelta con código %s", username, code)
        return code
