"""
Maps message text to a command token.
"""

from enum import Enum


class Command(str, Enum):
    START = "start"
    HELP = "help"
    PENDING_REQUESTS = "pending_requests"
    DEPOSITS = "deposits"
    WITHDRAWALS = "withdrawals"
    USERS = "users"
    STATS = "stats"
    MAINTENANCE_MODE = "maintenance_mode"
    UNKNOWN = "unknown"


COMMAND_LITERALS: dict[str, Command] = {
    "/start": Command.START,
    "/help": Command.HELP,
    "/pendingrequests": Command.PENDING_REQUESTS,
    "/deposits": Command.DEPOSITS,
    "/withdrawals": Command.WITHDRAWALS,
    "/users": Command.USERS,
    "/stats": Command.STATS,
    "/maintenancemode": Command.MAINTENANCE_MODE,
}


def classify(text: str) -> Command:
    """Exact match after trimming; anything else is UNKNOWN."""
    return COMMAND_LITERALS.get(text.strip(), Command.UNKNOWN)


def literal_for(command: Command) -> str | None:
    for literal, token in COMMAND_LITERALS.items():
        if token is command:
            return literal
    return None
