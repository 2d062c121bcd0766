"""BA Journey: sequential curriculum progress engine."""

__version__ = "0.1.0"
