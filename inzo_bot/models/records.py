"""
Data models for inbound Telegram updates and Supabase rows.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class InboundMessage:
    """The part of a Telegram update the command router needs."""

    chat_id: int
    user_id: int | None
    text: str

    @classmethod
    def from_update(cls, payload: Any) -> "InboundMessage | None":
        """
        Extract chat, sender and text from a webhook update.

        Returns None when the update carries no message or no text,
        which callers acknowledge without replying.
        """
        if not isinstance(payload, dict):
            return None

        message = payload.get("message")
        if not isinstance(message, dict):
            return None

        text = message.get("text")
        chat = message.get("chat")
        if not text or not isinstance(text, str) or not isinstance(chat, dict):
            return None
        if chat.get("id") is None:
            return None

        sender = message.get("from")
        user_id = sender.get("id") if isinstance(sender, dict) else None

        return cls(chat_id=chat["id"], user_id=user_id, text=text.strip())


def _embedded_profile(row: dict[str, Any]) -> dict[str, Any]:
    # PostgREST embeds to-one joins as an object, to-many as a list
    profile = row.get("profiles")
    if isinstance(profile, list):
        profile = profile[0] if profile else None
    return profile if isinstance(profile, dict) else {}


@dataclass
class Profile:
    """Row of the profiles table."""

    full_name: str | None = None
    phone: str | None = None
    balance: Any = None
    role: str | None = None
    created_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Profile":
        return cls(
            full_name=row.get("full_name"),
            phone=row.get("phone"),
            balance=row.get("balance"),
            role=row.get("role"),
            created_at=row.get("created_at"),
        )


@dataclass
class Deposit:
    """Pending deposit joined with its owner's profile."""

    amount: Any = None
    utr_number: str | None = None
    status: str | None = None
    created_at: str | None = None
    profile: Profile | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Deposit":
        return cls(
            amount=row.get("amount"),
            utr_number=row.get("utr_number"),
            status=row.get("status"),
            created_at=row.get("created_at"),
            profile=Profile.from_row(_embedded_profile(row)),
        )


@dataclass
class Withdrawal:
    """Pending withdrawal joined with its owner's profile."""

    amount: Any = None
    bank_name: str | None = None
    account_number: str | None = None
    status: str | None = None
    created_at: str | None = None
    profile: Profile | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Withdrawal":
        return cls(
            amount=row.get("amount"),
            bank_name=row.get("bank_name"),
            account_number=row.get("account_number"),
            status=row.get("status"),
            created_at=row.get("created_at"),
            profile=Profile.from_row(_embedded_profile(row)),
        )
