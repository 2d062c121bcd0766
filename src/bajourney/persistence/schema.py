"""Schema versioning for persisted JSON documents.

Every document written by BA Journey carries ``_schema`` and
``_version`` fields so that loads can reject foreign files and upgrade
older ones.

Schema Types:
- progress: A learner's step progress snapshot
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CURRENT_VERSIONS: dict[str, str] = {
    "progress": "1.0",
}

LEGACY_VERSION = "0.0"


class SchemaError(Exception):
    """Base exception for schema-related errors."""


class MigrationNotFoundError(SchemaError):
    """Raised when no migration path exists."""

    def __init__(self, schema_type: str, from_version: str, to_version: str) -> None:
        self.schema_type = schema_type
        self.from_version = from_version
        self.to_version = to_version
        super().__init__(
            f"No migration for {schema_type} from {from_version} to {to_version}"
        )


class InvalidSchemaError(SchemaError):
    """Raised when schema validation fails."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid schema in {path}: {message}")


@dataclass
class SchemaHeader:
    """Schema fields read from a document."""

    schema_type: str
    schema_version: str

    @property
    def is_current(self) -> bool:
        return self.schema_version == CURRENT_VERSIONS.get(self.schema_type)


def _version_key(version: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in version.split("."))
    except ValueError:
        return (0,)


def read_schema_header(
    data: dict[str, Any], path: Path, expected_type: str
) -> SchemaHeader:
    """Validate schema fields of a loaded document.

    Returns:
        SchemaHeader with version "0.0" for legacy documents.

    Raises:
        InvalidSchemaError: On a foreign schema type or a version newer
            than this build understands.
    """
    schema_type = data.get("_schema")
    schema_version = data.get("_version")

    if schema_type is None or schema_version is None:
        logger.debug("Legacy document detected (no schema fields): %s", path)
        return SchemaHeader(schema_type=expected_type, schema_version=LEGACY_VERSION)

    if schema_type != expected_type:
        raise InvalidSchemaError(
            path, f"Expected schema '{expected_type}', got '{schema_type}'"
        )

    current = CURRENT_VERSIONS[expected_type]
    if _version_key(str(schema_version)) > _version_key(current):
        raise InvalidSchemaError(
            path, f"Version {schema_version} is newer than supported {current}"
        )
    return SchemaHeader(schema_type=str(schema_type), schema_version=str(schema_version))


def write_schema_fields(schema_type: str) -> dict[str, str]:
    """Get schema fields to include in a document.

    Raises:
        ValueError: If schema_type is unknown.
    """
    if schema_type not in CURRENT_VERSIONS:
        raise ValueError(f"Unknown schema type: {schema_type}")

    return {
        "_schema": schema_type,
        "_version": CURRENT_VERSIONS[schema_type],
    }


# Migration registry
Migrator = Callable[[dict[str, Any]], dict[str, Any]]
MIGRATORS: dict[tuple[str, str, str], Migrator] = {}


def register_migrator(
    schema_type: str, from_version: str, to_version: str
) -> Callable[[Migrator], Migrator]:
    """Decorator to register a document migration.

    Example:
        @register_migrator("progress", "1.0", "2.0")
        def migrate_progress_1_to_2(data: dict[str, Any]) -> dict[str, Any]:
            ...
    """

    def decorator(fn: Migrator) -> Migrator:
        MIGRATORS[(schema_type, from_version, to_version)] = fn
        logger.debug(
            "Registered migrator: %s %s -> %s", schema_type, from_version, to_version
        )
        return fn

    return decorator


def migrate_if_needed(
    data: dict[str, Any], path: Path, schema_type: str
) -> dict[str, Any]:
    """Upgrade a loaded document to the current version.

    Raises:
        MigrationNotFoundError: If no migration path exists.
        InvalidSchemaError: If the document has the wrong schema.
    """
    header = read_schema_header(data, path, schema_type)
    if header.is_current:
        return data

    current_version = CURRENT_VERSIONS[schema_type]
    migrator = MIGRATORS.get((schema_type, header.schema_version, current_version))
    if migrator is None:
        raise MigrationNotFoundError(schema_type, header.schema_version, current_version)

    logger.info(
        "Migrating %s from %s to %s: %s",
        schema_type,
        header.schema_version,
        current_version,
        path,
    )
    return migrator(data)


@register_migrator("progress", LEGACY_VERSION, "1.0")
def _migrate_progress_legacy(data: dict[str, Any]) -> dict[str, Any]:
    """Wrap a bare ``{step_id: status}`` map in a versioned document."""
    return {
        **write_schema_fields("progress"),
        "curriculum": "",
        "learner": "",
        "updated_at": None,
        "progress": dict(data),
    }
