"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

ADMIN_ID = "424242"
USER_ID = 100500
CHAT_ID = 777


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123456:test_token")
    monkeypatch.setenv("TELEGRAM_ADMIN_ID", ADMIN_ID)
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co/")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service_role_key")
    monkeypatch.delenv("VITE_SUPABASE_URL", raising=False)
    monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
    monkeypatch.delenv("WEBHOOK_URL", raising=False)


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_store():
    """Create a mock Supabase store with empty results."""
    from inzo_bot.services.store import SupabaseStore

    store = MagicMock(spec=SupabaseStore)
    store.select = AsyncMock(return_value=[])
    store.select_with_count = AsyncMock(return_value=([], 0))
    store.count = AsyncMock(return_value=0)
    store.maybe_single = AsyncMock(return_value=None)
    store.close = AsyncMock()
    return store


@pytest.fixture
def mock_sender():
    """Create a mock Telegram sender."""
    from inzo_bot.services.telegram import TelegramSender

    sender = MagicMock(spec=TelegramSender)
    sender.send_message = AsyncMock()
    sender.initialize = AsyncMock()
    sender.shutdown = AsyncMock()
    sender.register_webhook = AsyncMock()
    return sender


@pytest.fixture
def router(mock_store, mock_sender):
    """Create a CommandRouter wired to the mocks."""
    from inzo_bot.commands import CommandRouter
    return CommandRouter(mock_store, mock_sender, ADMIN_ID)


@pytest.fixture
def admin_message():
    """Build a message sent by the admin."""
    from inzo_bot.models import InboundMessage

    def _build(text: str):
        return InboundMessage(chat_id=CHAT_ID, user_id=int(ADMIN_ID), text=text)
    return _build


@pytest.fixture
def user_message():
    """Build a message sent by a regular user."""
    from inzo_bot.models import InboundMessage

    def _build(text: str):
        return InboundMessage(chat_id=CHAT_ID, user_id=USER_ID, text=text)
    return _build


def make_update(text=None, user_id=USER_ID, chat_id=CHAT_ID) -> dict:
    """Telegram update payload as delivered to the webhook."""
    message = {
        "message_id": 1,
        "date": 1700000000,
        "chat": {"id": chat_id, "type": "private"},
        "from": {"id": user_id, "is_bot": False, "first_name": "Test"},
    }
    if text is not None:
        message["text"] = text
    return {"update_id": 1, "message": message}


@pytest.fixture(name="make_update")
def make_update_fixture():
    """Factory for webhook update payloads."""
    return make_update
