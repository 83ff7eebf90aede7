"""Custom exception types raised by componentkit."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "ComponentKitError",
    "NameValidationError",
    "PreconditionError",
    "UserCancellation",
    "WriteError",
]


class ComponentKitError(RuntimeError):
    """Base class for errors that end a generator run."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PreconditionError(ComponentKitError):
    """Raised when the host project does not look like a component project."""


class NameValidationError(ComponentKitError):
    """Raised when a component name does not match its required pattern."""

    def __init__(self, value: str, message: str) -> None:
        super().__init__(message)
        self.value = value


class UserCancellation(ComponentKitError):
    """Raised when the operator declines or interrupts the run."""


class WriteError(ComponentKitError):
    """Raised when a materialization step cannot write its file."""

    def __init__(self, step: str, path: Path, reason: str) -> None:
        super().__init__(f"{step} failed for {path}: {reason}")
        self.step = step
        self.path = path
