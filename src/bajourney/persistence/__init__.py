"""Progress persistence for BA Journey."""

from .progress_store import ProgressReader, ProgressSnapshot, ProgressWriter
from .schema import InvalidSchemaError, MigrationNotFoundError, SchemaError

__all__ = [
    "InvalidSchemaError",
    "MigrationNotFoundError",
    "ProgressReader",
    "ProgressSnapshot",
    "ProgressWriter",
    "SchemaError",
]
