"""Inline query results.

Every result shape is a member of :data:`INLINE_QUERY_RESULTS`, tagged by a
constant ``type`` literal that is written on encode and used to pick the
shape on decode.
"""

from __future__ import annotations

from ..variants import VariantFamily
from .base import ApiObject
from .keyboards import InlineKeyboardMarkup

__all__ = [
    "INLINE_QUERY_RESULTS",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultGame",
    "InlineQueryResultLocation",
    "InlineQueryResultPhoto",
    "InputTextMessageContent",
]


class InputTextMessageContent(ApiObject, kw_only=True):
    message_text: str
    parse_mode: str | None = None
    disable_web_page_preview: bool | None = None


class InlineQueryResult(ApiObject, kw_only=True):
    """Fields shared by every inline query result.

    ``id`` is 1-64 bytes upstream; the length is left to the server.
    """

    id: str
    reply_markup: InlineKeyboardMarkup | None = None

    @property
    def type(self) -> str:
        return self.__struct_config__.tag


INLINE_QUERY_RESULTS: VariantFamily[InlineQueryResult] = VariantFamily(
    "InlineQueryResult"
)


@INLINE_QUERY_RESULTS.register
class InlineQueryResultGame(
    InlineQueryResult, tag="game", tag_field="type", kw_only=True
):
    game_short_name: str


@INLINE_QUERY_RESULTS.register
class InlineQueryResultArticle(
    InlineQueryResult, tag="article", tag_field="type", kw_only=True
):
    title: str
    input_message_content: InputTextMessageContent
    url: str | None = None
    hide_url: bool | None = None
    description: str | None = None
    thumb_url: str | None = None
    thumb_width: int | None = None
    thumb_height: int | None = None


@INLINE_QUERY_RESULTS.register
class InlineQueryResultPhoto(
    InlineQueryResult, tag="photo", tag_field="type", kw_only=True
):
    photo_url: str
    thumb_url: str
    photo_width: int | None = None
    photo_height: int | None = None
    title: str | None = None
    description: str | None = None
    caption: str | None = None
    input_message_content: InputTextMessageContent | None = None


@INLINE_QUERY_RESULTS.register
class InlineQueryResultLocation(
    InlineQueryResult, tag="location", tag_field="type", kw_only=True
):
    latitude: float
    longitude: float
    title: str
    thumb_url: str | None = None
    thumb_width: int | None = None
    thumb_height: int | None = None
    input_message_content: InputTextMessageContent | None = None
