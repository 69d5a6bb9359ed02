"""
Application factory and main entry point.
"""

import asyncio

from aiohttp import web

from inzo_bot.commands import CommandRouter
from inzo_bot.core.config import Settings, get_settings
from inzo_bot.core.logging import get_logger, setup_logging
from inzo_bot.services import SupabaseStore, TelegramSender
from inzo_bot.webhooks import create_web_app, start_webhook_server

logger = get_logger(__name__)


def create_app(
    settings: Settings,
    store: SupabaseStore | None = None,
    sender: TelegramSender | None = None,
) -> web.Application:
    """Create the web application with its clients built once per process."""
    if store is None:
        store = SupabaseStore(
            settings.supabase_url,
            settings.supabase_service_role_key,
            timeout=settings.request_timeout,
        )
    if sender is None:
        sender = TelegramSender.from_token(settings.telegram_bot_token)

    if not settings.telegram_admin_id:
        logger.warning("TELEGRAM_ADMIN_ID not set, admin commands are disabled")

    router = CommandRouter(store, sender, settings.telegram_admin_id)
    app = create_web_app(router, path=settings.webhook_path, secret=settings.webhook_secret)

    async def on_startup(_: web.Application) -> None:
        await sender.initialize()
        if settings.webhook_url:
            await sender.register_webhook(settings.webhook_url, settings.webhook_secret)

    async def on_cleanup(_: web.Application) -> None:
        await store.close()
        await sender.shutdown()

    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)
    return app


async def main() -> None:
    """Main application entry point."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting bot...")

    app = create_app(settings)
    runner = await start_webhook_server(app, settings.host, settings.port)

    # Keep running until cancelled
    stop_signal = asyncio.Event()
    try:
        await stop_signal.wait()
    except asyncio.CancelledError:
        pass
    finally:
        await runner.cleanup()
