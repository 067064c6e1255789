from .base import ApiObject, ApiObjectLike, Validable
from .games import CallbackGame
from .inline import (
    INLINE_QUERY_RESULTS,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultGame,
    InlineQueryResultLocation,
    InlineQueryResultPhoto,
    InputTextMessageContent,
)
from .keyboards import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
)

__all__ = [
    "INLINE_QUERY_RESULTS",
    "ApiObject",
    "ApiObjectLike",
    "CallbackGame",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultGame",
    "InlineQueryResultLocation",
    "InlineQueryResultPhoto",
    "InputTextMessageContent",
    "KeyboardButton",
    "ReplyKeyboardMarkup",
    "Validable",
]
