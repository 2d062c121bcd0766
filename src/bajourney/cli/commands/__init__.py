"""CLI command handlers."""

from .complete import cmd_complete
from .next_step import cmd_next
from .reset import cmd_reset
from .status import cmd_status
from .tui import cmd_tui
from .validate import cmd_validate

__all__ = [
    "cmd_complete",
    "cmd_next",
    "cmd_reset",
    "cmd_status",
    "cmd_tui",
    "cmd_validate",
]
