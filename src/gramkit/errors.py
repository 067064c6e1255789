from __future__ import annotations

from typing import Any

__all__ = [
    "GramkitError",
    "MalformedInputError",
    "UnknownVariantError",
    "ValidationError",
]


class GramkitError(Exception):
    pass


class ValidationError(GramkitError):
    """A mandatory field is missing or empty.

    Only raised from ``validate()``; encoding and decoding never validate.
    """

    def __init__(self, message: str, obj: Any, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.obj = obj
        self.field = field

    def __str__(self) -> str:
        return f"{self.message} ({type(self.obj).__name__})"


class UnknownVariantError(GramkitError):
    def __init__(self, family: str, tag: str) -> None:
        super().__init__(f"unknown {family} variant {tag!r}")
        self.family = family
        self.tag = tag


class MalformedInputError(GramkitError):
    """Inbound JSON does not match the wire schema of the expected type."""

    def __init__(self, type_name: str, message: str) -> None:
        super().__init__(f"malformed {type_name}: {message}")
        self.type_name = type_name
        self.message = message
