"""Discriminator-tagged families of API objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import msgspec

from . import codec
from .errors import MalformedInputError, UnknownVariantError
from .logging import get_logger

__all__ = ["VariantFamily"]

logger = get_logger(__name__)


class VariantFamily[T: msgspec.Struct]:
    """Registry mapping discriminator literals to member struct types.

    Decoding reads the discriminator before anything else, picks the member
    registered for it and only then decodes the remaining fields with that
    member's schema.
    """

    __slots__ = ("name", "tag_field", "_members", "_probe", "_probe_decoder")

    def __init__(self, name: str, *, tag_field: str = "type") -> None:
        self.name = name
        self.tag_field = tag_field
        self._members: dict[str, type[T]] = {}
        self._probe = msgspec.defstruct(
            f"{name}Discriminator",
            [("tag", str | None, None)],
            rename={"tag": tag_field},
            forbid_unknown_fields=False,
        )
        self._probe_decoder = msgspec.json.Decoder(self._probe)

    def register(self, cls: type[T]) -> type[T]:
        config = cls.__struct_config__
        if config.tag_field != self.tag_field or not isinstance(config.tag, str):
            raise ValueError(
                f"{cls.__name__} must declare a string tag in {self.tag_field!r} "
                f"to join {self.name}"
            )
        existing = self._members.get(config.tag)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"duplicate {self.name} tag {config.tag!r}: "
                f"{existing.__name__} and {cls.__name__}"
            )
        self._members[config.tag] = cls
        logger.debug(
            "variant.registered", family=self.name, tag=config.tag, member=cls.__name__
        )
        return cls

    @property
    def members(self) -> tuple[type[T], ...]:
        return tuple(self._members.values())

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._members)

    def member_for(self, tag: str) -> type[T]:
        member = self._members.get(tag)
        if member is None:
            logger.warning("variant.unknown", family=self.name, tag=tag)
            raise UnknownVariantError(self.name, tag)
        return member

    def __contains__(self, tag: object) -> bool:
        return tag in self._members

    def __iter__(self) -> Iterator[type[T]]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self._members)

    def decode(self, data: bytes | str) -> T:
        try:
            probe = self._probe_decoder.decode(data)
        except msgspec.DecodeError as exc:
            raise MalformedInputError(self.name, str(exc)) from exc
        member = self._dispatch(probe.tag)
        return codec.decode(data, member)

    def from_builtins(self, data: Any) -> T:
        try:
            probe = msgspec.convert(data, self._probe)
        except msgspec.ValidationError as exc:
            raise MalformedInputError(self.name, str(exc)) from exc
        member = self._dispatch(probe.tag)
        return codec.from_builtins(data, member)

    def decode_many(self, data: bytes | str) -> list[T]:
        try:
            items = msgspec.json.decode(data, type=list[msgspec.Raw])
        except msgspec.DecodeError as exc:
            raise MalformedInputError(f"list[{self.name}]", str(exc)) from exc
        return [self.decode(item) for item in items]

    def from_builtins_many(self, items: Iterable[Any]) -> list[T]:
        return [self.from_builtins(item) for item in items]

    def _dispatch(self, tag: str | None) -> type[T]:
        if tag is None:
            raise MalformedInputError(
                self.name, f"missing discriminator field {self.tag_field!r}"
            )
        member = self.member_for(tag)
        logger.debug(
            "variant.decode", family=self.name, tag=tag, member=member.__name__
        )
        return member
