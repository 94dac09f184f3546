"""Data transfer object for the submitted login form."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CredentialForm:
    """Represent the credentials captured by a login request."""

    username: Optional[str] = None
    password: Optional[str] = None
