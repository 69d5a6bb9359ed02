"""
Reply texts for admin commands.

Every field read from the store goes through ``display`` so missing data
renders as a placeholder rather than ``None`` or an empty string.
"""

from __future__ import annotations

import html
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from inzo_bot.models import Deposit, Profile, Withdrawal

CURRENCY = "₹"
UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"
DEFAULT_ROLE = "user"

DEPOSITS_LIMIT = 5
WITHDRAWALS_LIMIT = 5
RECENT_USERS_LIMIT = 10

DENIED_TEXT = "❌ This command is only available for admins."
START_TEXT = (
    "🎉 <b>Welcome to INZO Investment Platform!</b>\n\n"
    "Use /help to see available commands."
)
UNKNOWN_TEXT = "❓ Unknown command. Use /help to see available commands."
NO_DEPOSITS_TEXT = "✅ No pending deposits!"
NO_WITHDRAWALS_TEXT = "✅ No pending withdrawals!"


def display(value: Any, default: str = NOT_AVAILABLE) -> str:
    """Render a store value as escaped text, falling back to ``default``."""
    if value is None:
        return default
    text = str(value).strip()
    if not text:
        return default
    return html.escape(text, quote=False)


def format_amount(value: Any) -> str:
    """Currency amount; missing amounts count as zero."""
    if value is None or value == "":
        return f"{CURRENCY}0"
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        return f"{CURRENCY}{display(value, '0')}"
    if not number.is_finite():
        return f"{CURRENCY}{display(value, '0')}"
    if number == number.to_integral_value():
        return f"{CURRENCY}{int(number)}"
    return f"{CURRENCY}{format(number.normalize(), 'f')}"


def format_count(value: int | None) -> str:
    return str(value or 0)


def _profile(profile: Profile | None) -> Profile:
    return profile if profile is not None else Profile()


def format_help(commands: Iterable[tuple[str, str]], is_admin: bool) -> str:
    header = "📋 <b>Admin Commands:</b>" if is_admin else "📋 <b>Available Commands:</b>"
    lines = [f"{literal} - {description}" for literal, description in commands]
    return header + "\n\n" + "\n".join(lines)


def format_pending_requests(deposits: int | None, withdrawals: int | None) -> str:
    return (
        "📊 <b>Pending Requests:</b>\n\n"
        f"💰 Deposits: {format_count(deposits)}\n"
        f"💸 Withdrawals: {format_count(withdrawals)}"
    )


def format_deposits(deposits: list[Deposit]) -> str:
    if not deposits:
        return NO_DEPOSITS_TEXT

    text = "💰 <b>Pending Deposits:</b>\n\n"
    for index, deposit in enumerate(deposits[:DEPOSITS_LIMIT], start=1):
        profile = _profile(deposit.profile)
        text += (
            f"{index}. <b>{display(profile.full_name, UNKNOWN)}</b>\n"
            f"   Amount: {format_amount(deposit.amount)}\n"
            f"   UTR: {display(deposit.utr_number)}\n"
            f"   Phone: {display(profile.phone)}\n\n"
        )
    return text


def format_withdrawals(withdrawals: list[Withdrawal]) -> str:
    if not withdrawals:
        return NO_WITHDRAWALS_TEXT

    text = "💸 <b>Pending Withdrawals:</b>\n\n"
    for index, withdrawal in enumerate(withdrawals[:WITHDRAWALS_LIMIT], start=1):
        profile = _profile(withdrawal.profile)
        text += (
            f"{index}. <b>{display(profile.full_name, UNKNOWN)}</b>\n"
            f"   Amount: {format_amount(withdrawal.amount)}\n"
            f"   Bank: {display(withdrawal.bank_name)}\n"
            f"   Account: {display(withdrawal.account_number)}\n"
            f"   Phone: {display(profile.phone)}\n\n"
        )
    return text


def format_users(total: int | None, profiles: list[Profile]) -> str:
    text = f"👥 <b>Total Users: {format_count(total)}</b>\n\n"
    if not profiles:
        return text

    text += "<b>Recent Users:</b>\n\n"
    for index, profile in enumerate(profiles[:RECENT_USERS_LIMIT], start=1):
        text += (
            f"{index}. {display(profile.full_name, UNKNOWN)}\n"
            f"   Phone: {display(profile.phone)}\n"
            f"   Balance: {format_amount(profile.balance)}\n"
            f"   Role: {display(profile.role, DEFAULT_ROLE)}\n\n"
        )
    return text


def format_stats(
    users: int | None,
    pending_deposits: int | None,
    pending_withdrawals: int | None,
    active_investments: int | None,
) -> str:
    return (
        "📊 <b>System Statistics:</b>\n\n"
        f"👥 Total Users: {format_count(users)}\n"
        f"💰 Pending Deposits: {format_count(pending_deposits)}\n"
        f"💸 Pending Withdrawals: {format_count(pending_withdrawals)}\n"
        f"📈 Active Investments: {format_count(active_investments)}"
    )


def format_maintenance_mode(enabled: bool) -> str:
    status = "🔴 ON" if enabled else "🟢 OFF"
    return f"🔧 <b>Maintenance Mode:</b> {status}"
