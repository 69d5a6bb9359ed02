"""
Webhook server setup.
"""

from aiohttp import web

from inzo_bot.commands import CommandRouter
from inzo_bot.core.logging import get_logger
from inzo_bot.webhooks.telegram import ROUTER_KEY, SECRET_KEY, handle_telegram_webhook

logger = get_logger(__name__)


def create_web_app(
    router: CommandRouter,
    path: str = "/api/telegram-webhook",
    secret: str | None = None,
) -> web.Application:
    """
    Build the aiohttp application serving the Telegram webhook.

    Args:
        router: Command router answering inbound messages
        path: URL path of the webhook endpoint
        secret: Expected X-Telegram-Bot-Api-Secret-Token value, if any
    """
    app = web.Application()
    app[ROUTER_KEY] = router
    if secret:
        app[SECRET_KEY] = secret
    app.router.add_route("*", path, handle_telegram_webhook)
    return app


async def start_webhook_server(app: web.Application, host: str = "0.0.0.0", port: int = 8080) -> web.AppRunner:
    """
    Start the webhook server.

    Args:
        app: Application from create_web_app
        host: Host to bind to
        port: Port to bind to

    Returns:
        The runner, for cleanup on shutdown
    """
    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    logger.info(f"Webhook server started on {host}:{port}")
    return runner
