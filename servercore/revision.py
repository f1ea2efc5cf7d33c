"""Revision and database schema version numbers of the server core."""

from __future__ import annotations

from dataclasses import dataclass

REVISION_NR = "2201001"


@dataclass(frozen=True)
class DatabaseVersion:
    """Version triple and description expected for one database."""

    version: int
    structure: int
    content: int
    description: str

    def __str__(self) -> str:
        return f"{self.version}.{self.structure}.{self.content:03d} ({self.description})"


REALMD_DB = DatabaseVersion(22, 1, 1, "Release 22")
CHAR_DB = DatabaseVersion(22, 1, 1, "Release 22")
WORLD_DB = DatabaseVersion(22, 1, 1, "Release 22")