"""
Telegram webhook handler.
"""

import hmac
from datetime import datetime, timezone

from aiohttp import web

from inzo_bot.commands import CommandRouter
from inzo_bot.core.logging import get_logger
from inzo_bot.models import InboundMessage

logger = get_logger(__name__)

ROUTER_KEY = web.AppKey("router", CommandRouter)
SECRET_KEY = web.AppKey("webhook_secret", str)

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


async def handle_telegram_webhook(request: web.Request) -> web.Response:
    """Liveness probe on GET, Telegram updates on POST."""
    if request.method == "GET":
        return web.json_response({
            "status": "ok",
            "message": "Telegram webhook is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    if request.method != "POST":
        return web.json_response({"error": "Method not allowed"}, status=405)

    secret = request.app.get(SECRET_KEY)
    if secret:
        received = request.headers.get(SECRET_HEADER, "")
        if not hmac.compare_digest(received, secret):
            return web.json_response({"ok": False, "error": "Unauthorized"}, status=401)

    try:
        try:
            payload = await request.json()
        except ValueError:
            logger.warning("Ignoring update with undecodable body")
            return web.json_response({"ok": True})

        message = InboundMessage.from_update(payload)
        if message is None:
            return web.json_response({"ok": True})

        await request.app[ROUTER_KEY].handle(message)
        return web.json_response({"ok": True})

    except Exception:
        logger.exception("Webhook error")
        return web.json_response({"ok": False, "error": "Internal Server Error"}, status=500)
