"""Wire encoding for API objects.

Every struct declaration is the single source of its JSON shape. msgspec
reads it directly for the tree encoder (:func:`to_builtins`), the streaming
encoder (:func:`encode`, :func:`encode_into`, :func:`write`) and the
decoders, so field names, order and omission are shared. :func:`wire_fields`
exposes the same declaration as an ordered field list for validation and
introspection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any

import msgspec

from .errors import MalformedInputError

__all__ = [
    "WireField",
    "decode",
    "encode",
    "encode_into",
    "from_builtins",
    "to_builtins",
    "wire_fields",
    "write",
]


@dataclass(frozen=True, slots=True)
class WireField:
    name: str
    attr: str | None
    mandatory: bool
    literal: str | None = None

    @property
    def is_discriminator(self) -> bool:
        return self.attr is None


_FIELDS: dict[type[msgspec.Struct], tuple[WireField, ...]] = {}
_DECODERS: dict[type[msgspec.Struct], msgspec.json.Decoder] = {}
_ENCODER = msgspec.json.Encoder()


def wire_fields(cls: type[msgspec.Struct]) -> tuple[WireField, ...]:
    cached = _FIELDS.get(cls)
    if cached is not None:
        return cached
    fields: list[WireField] = []
    config = cls.__struct_config__
    if config.tag is not None and config.tag_field is not None:
        fields.append(
            WireField(
                name=config.tag_field,
                attr=None,
                mandatory=True,
                literal=str(config.tag),
            )
        )
    for info in msgspec.structs.fields(cls):
        fields.append(
            WireField(name=info.encode_name, attr=info.name, mandatory=info.required)
        )
    result = tuple(fields)
    _FIELDS[cls] = result
    return result


def to_builtins(obj: msgspec.Struct) -> dict[str, Any]:
    return msgspec.to_builtins(obj)


def encode(obj: msgspec.Struct) -> bytes:
    return _ENCODER.encode(obj)


def encode_into(obj: msgspec.Struct, buffer: bytearray) -> None:
    _ENCODER.encode_into(obj, buffer, -1)


def write(obj: msgspec.Struct, fp: IO[bytes]) -> int:
    buffer = bytearray()
    _ENCODER.encode_into(obj, buffer)
    return fp.write(buffer)


def decode[T: msgspec.Struct](data: bytes | str, cls: type[T]) -> T:
    decoder = _DECODERS.get(cls)
    if decoder is None:
        decoder = msgspec.json.Decoder(cls)
        _DECODERS[cls] = decoder
    try:
        return decoder.decode(data)
    except msgspec.DecodeError as exc:
        raise MalformedInputError(cls.__name__, str(exc)) from exc


def from_builtins[T: msgspec.Struct](data: Any, cls: type[T]) -> T:
    try:
        return msgspec.convert(data, cls)
    except msgspec.ValidationError as exc:
        raise MalformedInputError(cls.__name__, str(exc)) from exc
