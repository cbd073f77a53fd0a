"""Command dispatch package."""

from .core import Shell
from .registry import COMMAND_REGISTRY, CommandRegistry, CommandResult, CommandSpec

__all__ = ["Shell", "CommandResult", "CommandSpec", "CommandRegistry", "COMMAND_REGISTRY"]
