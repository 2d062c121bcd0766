"""Messages shared by journey screens."""

from textual.message import Message


class ViewChanged(Message):
    """The navigator moved to a different view or progress changed."""
