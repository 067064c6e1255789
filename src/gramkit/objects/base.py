"""Base struct and capability contracts shared by every API object."""

from __future__ import annotations

from typing import IO, Any, Protocol, Self, runtime_checkable

import msgspec

from .. import codec
from ..errors import ValidationError
from ..logging import get_logger

__all__ = ["ApiObject", "ApiObjectLike", "Validable"]

logger = get_logger(__name__)


@runtime_checkable
class Validable(Protocol):
    def validate(self) -> None: ...


@runtime_checkable
class ApiObjectLike(Validable, Protocol):
    def to_json(self) -> dict[str, Any]: ...


class ApiObject(
    msgspec.Struct,
    kw_only=True,
    omit_defaults=True,
    forbid_unknown_fields=False,
):
    """An API value object.

    Fields declared without a default are mandatory: they are always written
    to the wire, required when decoding, and must be non-null (and non-empty
    for strings) for :meth:`validate` to pass. Optional fields default to
    ``None`` and are left out of the encoded JSON while unset.
    """

    def validate(self) -> None:
        fields = codec.wire_fields(type(self))
        for field in fields:
            if field.attr is None or not field.mandatory:
                continue
            value = getattr(self, field.attr)
            if value is None or (isinstance(value, str) and not value):
                logger.debug(
                    "validation.failed",
                    object=type(self).__name__,
                    field=field.name,
                )
                raise ValidationError(
                    f"{field.name} parameter can't be empty", self, field=field.name
                )
        self._check()
        for field in fields:
            if field.attr is not None:
                _cascade(getattr(self, field.attr))

    def _check(self) -> None:
        """Type-specific checks, run after the mandatory fields pass."""

    def to_json(self) -> dict[str, Any]:
        return codec.to_builtins(self)

    def encode(self) -> bytes:
        return codec.encode(self)

    def write(self, fp: IO[bytes]) -> int:
        return codec.write(self, fp)

    @classmethod
    def decode(cls, data: bytes | str) -> Self:
        return codec.decode(data, cls)

    @classmethod
    def from_json(cls, data: Any) -> Self:
        return codec.from_builtins(data, cls)


def _cascade(value: Any) -> None:
    if isinstance(value, ApiObject):
        value.validate()
    elif isinstance(value, (list, tuple)):
        for item in value:
            _cascade(item)
