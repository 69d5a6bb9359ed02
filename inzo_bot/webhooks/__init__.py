# Webhooks - HTTP entry point for Telegram updates
from .server import create_web_app, start_webhook_server

__all__ = ["create_web_app", "start_webhook_server"]
