"""Shared state describing the user currently logged in."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SessionState:
    """Hold the current user; writes are serialized through ``lock``."""

    current_user: Optional[str] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
