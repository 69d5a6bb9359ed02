"""
Custom application exceptions.
"""


class BotError(Exception):
    """Base exception for bot errors."""
    pass


class APIError(BotError):
    """External API call failed."""
    pass


class DataStoreError(APIError):
    """Supabase (PostgREST) query failed."""
    pass


class TelegramAPIError(APIError):
    """Telegram Bot API call failed."""
    pass
