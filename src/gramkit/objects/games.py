from __future__ import annotations

from .base import ApiObject

__all__ = ["CallbackGame"]


class CallbackGame(ApiObject, kw_only=True):
    """Placeholder sent in a button to launch a game; it holds no fields."""
