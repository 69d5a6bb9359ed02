"""
Telegram Bot API client used for replies and webhook registration.
"""

from telegram import Bot, LinkPreviewOptions
from telegram.constants import ParseMode
from telegram.error import TelegramError

from inzo_bot.core.exceptions import TelegramAPIError
from inzo_bot.core.logging import get_logger

logger = get_logger(__name__)


class TelegramSender:
    """Thin wrapper around telegram.Bot for HTML replies."""

    def __init__(self, bot: Bot):
        self._bot = bot

    @classmethod
    def from_token(cls, token: str) -> "TelegramSender":
        return cls(Bot(token=token))

    async def initialize(self) -> None:
        await self._bot.initialize()

    async def shutdown(self) -> None:
        await self._bot.shutdown()

    async def send_message(self, chat_id: int, text: str) -> None:
        """
        Send an HTML formatted message.

        Raises:
            TelegramAPIError: If the Bot API rejects the call
        """
        try:
            await self._bot.send_message(
                chat_id=chat_id,
                text=text,
                parse_mode=ParseMode.HTML,
                link_preview_options=LinkPreviewOptions(is_disabled=True),
            )
        except TelegramError as e:
            raise TelegramAPIError(f"Failed to send message to {chat_id}: {e}") from e

    async def register_webhook(self, url: str, secret: str | None = None) -> None:
        """Point Telegram at the webhook endpoint."""
        try:
            await self._bot.set_webhook(url=url, secret_token=secret, allowed_updates=["message"])
        except TelegramError as e:
            raise TelegramAPIError(f"Failed to set webhook: {e}") from e
        logger.info(f"Webhook registered at {url}")
