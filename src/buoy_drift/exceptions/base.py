"""Base exception for buoy-drift."""

from typing import Mapping, Optional


class BuoyError(Exception):
    """Base exception for all buoy-drift errors.

    ``details`` are appended to the message as ``(key=value, ...)``;
    ``hint`` is a one-line remedy the CLI prints under the error.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, object]] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}
        self.hint = hint

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"
