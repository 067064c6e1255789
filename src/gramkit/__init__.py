"""Telegram Bot API value objects: validation and JSON wire codec."""

from .codec import decode, encode, from_builtins, to_builtins, wire_fields
from .errors import (
    GramkitError,
    MalformedInputError,
    UnknownVariantError,
    ValidationError,
)
from .objects import (
    INLINE_QUERY_RESULTS,
    ApiObject,
    CallbackGame,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultGame,
    InlineQueryResultLocation,
    InlineQueryResultPhoto,
    InputTextMessageContent,
    KeyboardButton,
    ReplyKeyboardMarkup,
)
from .variants import VariantFamily

__version__ = "0.1.0"

__all__ = [
    "INLINE_QUERY_RESULTS",
    "ApiObject",
    "CallbackGame",
    "GramkitError",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultGame",
    "InlineQueryResultLocation",
    "InlineQueryResultPhoto",
    "InputTextMessageContent",
    "KeyboardButton",
    "MalformedInputError",
    "ReplyKeyboardMarkup",
    "UnknownVariantError",
    "ValidationError",
    "VariantFamily",
    "decode",
    "encode",
    "from_builtins",
    "to_builtins",
    "wire_fields",
]
