# Services module - external API integrations
from .store import SupabaseStore
from .telegram import TelegramSender

__all__ = ["SupabaseStore", "TelegramSender"]
