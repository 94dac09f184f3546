"""Centralized helpers to resolve login settings from the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, Mapping, MutableMapping, Optional, Union


class LoginConfiguration:
    """Load credential store settings from environment variables and .env files.

    Args:
        env_files: Optional iterable with names or paths of files containing key-value
            pairs (``KEY=VALUE``) to merge into the environment. Relative paths are
            resolved from the repository root.
        environ: Optional mapping used instead of ``os.environ``. Intended for tests.
    """

    DEFAULT_ENV_FILES: tuple[str, ...] = (".env",)
    DB_URL_KEY = "LOGIN_DB_URL"
    BACKEND_KEY = "LOGIN_STORE_BACKEND"
    USERS_KEY = "LOGIN_USERS"
    MEMORY_BACKEND = "memory"
    SQLSERVER_BACKEND = "sqlserver"

    def __init__(
        self,
        env_files: Optional[Iterable[Union[str, Path]]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Persist the environment data used to resolve configuration values."""
        self._env_files = tuple(env_files) if env_files is not None else self.DEFAULT_ENV_FILES
        self._base_environ: MutableMapping[str, str] = dict(environ) if environ is not None else dict(os.environ)
        self._file_values = self._load_env_files()
        self._merged_env = self._merge_environment()

    def _merge_environment(self) -> Dict[str, str]:
        """Combine values from .env files with the active environment.

        Returns:
            A dictionary where operating system variables override the values
            defined in .env files.
        """

        merged: Dict[str, str] = dict(self._file_values)
        merged.update(self._base_environ)
        return merged

    def _load_env_files(self) -> Dict[str, str]:
        """Read the configured .env files and return their key-value pairs."""

        values: Dict[str, str] = {}
        root_dir = Path(__file__).resolve().parents[2]
        for candidate in self._env_files:
            path = Path(candidate)
            if not path.is_absolute():
                path = root_dir / path
            if not path.exists():
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except OSError:
                continue
            for raw_line in text.splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                key = key.strip()
                if not key:
                    continue
                values[key] = raw_value.strip().strip('"').strip("'")
        return values

    def get_database_url(self) -> Optional[str]:
        """Return the SQL Server URL used by the credential store, if any."""

        return self._merged_env.get(self.DB_URL_KEY, "").strip() or None

    def get_backend(self) -> str:
        """Return the configured credential store backend, ``memory`` by default."""

        backend = self._merged_env.get(self.BACKEND_KEY, "").strip().lower()
        return backend or self.MEMORY_BACKEND

    def is_sqlserver_backend(self) -> bool:
        """Determine whether lookups should go to SQL Server."""

        return self.get_backend() == self.SQLSERVER_BACKEND

    def get_users(self) -> str:
        """Return the raw ``user[:password]`` list used by the in-memory store."""

        return self._merged_env.get(self.USERS_KEY, "")

    def export(self) -> Dict[str, str]:
        """Expose the merged environment values for additional consumers."""

        return dict(self._merged_env)
