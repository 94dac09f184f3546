"""Data transfer objects describing login dispatch responses."""

from enum import Enum


class LoginOutcome(str, Enum):
    """Enumerate the possible outcomes of a login dispatch."""

    SUCCESS = "SUCCESS"
    FAIL = "FAIL"
    ERROR = "ERROR"
    INVALID = "INVALID"
