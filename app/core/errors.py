"""
Sign-up errors - one tagged exception type mapped to HTTP responses in the handler.
"""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNKNOWN = "unknown"


UNKNOWN_ERROR_MSG = "Unknown Error"


class SignUpError(Exception):
    """Error raised anywhere in the sign-up flow. `msg` is safe to show to clients."""

    def __init__(self, kind: ErrorKind, status_code: int, msg: str, failures: list | None = None):
        super().__init__(msg)
        self.kind = kind
        self.status_code = status_code
        self.msg = msg
        self.failures = failures or []

    def __repr__(self) -> str:
        return f"<SignUpError(kind={self.kind.value}, status={self.status_code}, msg={self.msg!r})>"

    @classmethod
    def validation(cls, msg: str, failures: list | None = None) -> "SignUpError":
        return cls(ErrorKind.VALIDATION, status.HTTP_400_BAD_REQUEST, msg, failures)

    @classmethod
    def conflict(cls, msg: str) -> "SignUpError":
        return cls(ErrorKind.CONFLICT, status.HTTP_400_BAD_REQUEST, msg)

    @classmethod
    def unknown(cls) -> "SignUpError":
        return cls(ErrorKind.UNKNOWN, status.HTTP_500_INTERNAL_SERVER_ERROR, UNKNOWN_ERROR_MSG)

    def to_body(self) -> dict:
        return {"success": False, "msg": self.msg}
