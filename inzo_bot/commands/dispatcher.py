"""
Command registry and dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Awaitable, Callable

from inzo_bot.commands import handlers
from inzo_bot.commands.classifier import Command, classify
from inzo_bot.commands.formatting import DENIED_TEXT
from inzo_bot.core.logging import get_logger
from inzo_bot.models import InboundMessage
from inzo_bot.services.store import SupabaseStore
from inzo_bot.services.telegram import TelegramSender

logger = get_logger(__name__)

Handler = Callable[[bool, SupabaseStore], Awaitable[str]]


@dataclass(frozen=True)
class CommandSpec:
    """Registry entry for a command token."""

    handler: Handler | None = None
    admin_only: bool = False
    description: str | None = None


def with_help(commands: dict[Command, CommandSpec]) -> dict[Command, CommandSpec]:
    """Copy of ``commands`` whose /help entry lists that same table."""
    table = dict(commands)
    if Command.HELP in table:
        table[Command.HELP] = replace(table[Command.HELP], handler=handlers.help_command(table))
    return table


COMMANDS: dict[Command, CommandSpec] = with_help({
    Command.START: CommandSpec(handlers.start, description="Welcome message"),
    # handler bound by with_help
    Command.HELP: CommandSpec(description="Show this help message"),
    Command.PENDING_REQUESTS: CommandSpec(
        handlers.pending_requests, admin_only=True, description="View pending transactions"
    ),
    Command.DEPOSITS: CommandSpec(handlers.deposits, admin_only=True, description="View pending deposits"),
    Command.WITHDRAWALS: CommandSpec(
        handlers.withdrawals, admin_only=True, description="View pending withdrawals"
    ),
    Command.USERS: CommandSpec(handlers.users, admin_only=True, description="View all users"),
    Command.STATS: CommandSpec(handlers.stats, admin_only=True, description="System statistics"),
    Command.MAINTENANCE_MODE: CommandSpec(
        handlers.maintenance_mode, admin_only=True, description="Check maintenance mode"
    ),
    Command.UNKNOWN: CommandSpec(handlers.unknown),
})


def is_admin(sender_id: int | str | None, admin_id: str | None) -> bool:
    """The single configured admin, compared as strings."""
    if sender_id is None or not admin_id:
        return False
    return str(sender_id) == str(admin_id)


class CommandRouter:
    """Classifies, authorizes and answers one inbound message."""

    def __init__(
        self,
        store: SupabaseStore,
        sender: TelegramSender,
        admin_id: str | None,
        commands: dict[Command, CommandSpec] | None = None,
    ):
        self._store = store
        self._sender = sender
        self._admin_id = admin_id
        self._commands = with_help(commands if commands is not None else COMMANDS)

    async def reply_for(self, message: InboundMessage) -> str:
        command = classify(message.text)
        spec = self._commands.get(command, self._commands[Command.UNKNOWN])
        admin = is_admin(message.user_id, self._admin_id)

        if spec.admin_only and not admin:
            logger.warning(f"Denied {command.value} for user {message.user_id}")
            return DENIED_TEXT

        logger.info(f"Handling {command.value} for user {message.user_id}")
        return await spec.handler(admin, self._store)

    async def handle(self, message: InboundMessage) -> None:
        """Answer the message with exactly one reply."""
        text = await self.reply_for(message)
        await self._sender.send_message(message.chat_id, text)
