"""Inline and reply keyboards."""

from __future__ import annotations

from ..logging import get_logger
from .base import ApiObject
from .games import CallbackGame

__all__ = [
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "KeyboardButton",
    "ReplyKeyboardMarkup",
]

logger = get_logger(__name__)

_BUTTON_ACTIONS = (
    "url",
    "callback_data",
    "callback_game",
    "switch_inline_query",
    "switch_inline_query_current_chat",
)


class InlineKeyboardButton(ApiObject, kw_only=True):
    """One button of an inline keyboard.

    The Bot API expects exactly one of the optional actions to be set. This
    is not enforced: several actions only produce a
    ``button.ambiguous_action`` warning during validation, and the server
    decides which one applies.
    """

    text: str
    url: str | None = None
    callback_data: str | None = None
    callback_game: CallbackGame | None = None
    # may be "" to insert only the bot's username
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None

    def actions(self) -> tuple[str, ...]:
        return tuple(
            name for name in _BUTTON_ACTIONS if getattr(self, name) is not None
        )

    def _check(self) -> None:
        actions = self.actions()
        if len(actions) > 1:
            logger.warning(
                "button.ambiguous_action", text=self.text, actions=list(actions)
            )


class InlineKeyboardMarkup(ApiObject, kw_only=True):
    inline_keyboard: list[list[InlineKeyboardButton]]

    @classmethod
    def from_rows(cls, *rows: list[InlineKeyboardButton]) -> InlineKeyboardMarkup:
        return cls(inline_keyboard=[list(row) for row in rows])


class KeyboardButton(ApiObject, kw_only=True):
    text: str
    request_contact: bool | None = None
    request_location: bool | None = None


class ReplyKeyboardMarkup(ApiObject, kw_only=True):
    keyboard: list[list[KeyboardButton]]
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    selective: bool | None = None
