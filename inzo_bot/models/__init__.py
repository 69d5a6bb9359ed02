# Models - inbound updates and Supabase records
from .records import Deposit, InboundMessage, Profile, Withdrawal

__all__ = ["Deposit", "InboundMessage", "Profile", "Withdrawal"]
