# Commands - classification, registry and reply formatting
from .classifier import Command, classify
from .dispatcher import COMMANDS, CommandRouter, CommandSpec, is_admin

__all__ = ["COMMANDS", "Command", "CommandRouter", "CommandSpec", "classify", "is_admin"]
