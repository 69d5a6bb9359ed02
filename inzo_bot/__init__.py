"""
INZO admin bot: answers admin commands sent to the Telegram bot with
views over the Supabase data.
"""

__version__ = "0.1.0"
