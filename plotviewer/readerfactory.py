"""Chooses a data reader by file extension."""

from __future__ import annotations

from typing import Iterable

from .readers import DataReader, JsonReader, SqlReader


class ReaderFactory:
    """Maps file extensions to readers, always including JSON and SQLite."""

    def __init__(self, readers: Iterable[DataReader | None] | None = None) -> None:
        self._readers: dict[str, DataReader] = {}
        for reader in readers or ():
            if reader and reader.name not in self._readers:
                self._readers[reader.name] = reader
        self._readers.setdefault("json", JsonReader())
        self._readers.setdefault("sqlite", SqlReader())

    def get_reader(self, ext: str) -> DataReader | None:
        """Return the reader for an extension, ignoring case, or None."""
        return self._readers.get(ext.lower())

    def extensions(self) -> list[str]:
        """Return the known extensions in registration order."""
        return list(self._readers)