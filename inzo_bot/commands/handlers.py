"""
Command handlers.

Each handler takes ``(is_admin, store)`` and returns the reply text. Admin
checks happen in the dispatcher before a handler runs.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Mapping

from inzo_bot.commands import formatting
from inzo_bot.commands.classifier import Command, literal_for
from inzo_bot.models import Deposit, Profile, Withdrawal
from inzo_bot.services.store import SupabaseStore

PENDING = {"status": "pending"}
ACTIVE = {"status": "active"}


async def start(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /start command."""
    return formatting.START_TEXT


def help_entries(commands: Mapping[Command, Any], is_admin: bool) -> list[tuple[str, str]]:
    """(literal, description) pairs: admin commands for admins, public ones otherwise."""
    entries = []
    for command, spec in commands.items():
        literal = literal_for(command)
        if literal is None or spec.description is None:
            continue
        if spec.admin_only == is_admin:
            entries.append((literal, spec.description))
    return entries


def help_command(commands: Mapping[Command, Any]) -> Callable[[bool, SupabaseStore], Awaitable[str]]:
    """Build the /help handler listing the given command table."""

    async def _help(is_admin: bool, store: SupabaseStore) -> str:
        return formatting.format_help(help_entries(commands, is_admin), is_admin)

    return _help


async def pending_requests(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /pendingrequests command."""
    deposits, withdrawals = await asyncio.gather(
        store.count("deposits", filters=PENDING),
        store.count("withdrawals", filters=PENDING),
    )
    return formatting.format_pending_requests(deposits, withdrawals)


async def deposits(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /deposits command."""
    rows = await store.select(
        "deposits",
        "*, profiles(full_name, phone)",
        filters=PENDING,
        order_by="created_at",
        limit=formatting.DEPOSITS_LIMIT,
    )
    return formatting.format_deposits([Deposit.from_row(row) for row in rows])


async def withdrawals(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /withdrawals command."""
    rows = await store.select(
        "withdrawals",
        "*, profiles(full_name, phone)",
        filters=PENDING,
        order_by="created_at",
        limit=formatting.WITHDRAWALS_LIMIT,
    )
    return formatting.format_withdrawals([Withdrawal.from_row(row) for row in rows])


async def users(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /users command."""
    rows, total = await store.select_with_count(
        "profiles",
        "*",
        order_by="created_at",
        limit=formatting.RECENT_USERS_LIMIT,
    )
    return formatting.format_users(total, [Profile.from_row(row) for row in rows])


async def stats(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /stats command."""
    counts = await asyncio.gather(
        store.count("profiles"),
        store.count("deposits", filters=PENDING),
        store.count("withdrawals", filters=PENDING),
        store.count("investments", filters=ACTIVE),
    )
    return formatting.format_stats(*counts)


async def maintenance_mode(is_admin: bool, store: SupabaseStore) -> str:
    """Handle /maintenancemode command."""
    row = await store.maybe_single("admin_settings", "maintenance_mode")
    enabled = bool(row and row.get("maintenance_mode"))
    return formatting.format_maintenance_mode(enabled)


async def unknown(is_admin: bool, store: SupabaseStore) -> str:
    return formatting.UNKNOWN_TEXT
