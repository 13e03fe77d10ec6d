"""Custom exception types for grman."""

from __future__ import annotations


class GrmanError(Exception):
    """Base class for all grman errors."""


class CommandNotFoundError(GrmanError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown command '{name}'")
        self.name = name


class GrammarLoadError(GrmanError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class StartupValidationError(GrmanError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
