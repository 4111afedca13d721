"""Readers that load time series from JSON and SQLite files."""

from __future__ import annotations

import json
import re
import sqlite3
from abc import ABC, abstractmethod
from contextlib import closing
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path

from .datacontainer import DataContainer

DATE_PATTERNS = (
    "dd.MM.yyyy HH:mm",
    "dd.MM.yyyy",
    "yyyy.MM.dd HH:mm",
    "yyyy.MM.dd",
    "dd-MM-yyyy HH:mm",
    "dd-MM-yyyy",
    "yyyy-MM-dd HH:mm",
    "yyyy-MM-dd",
)

_TOKENS = {
    "yyyy": r"(?P<year>[0-9]{4})",
    "MM": r"(?P<month>[0-9]{2})",
    "dd": r"(?P<day>[0-9]{2})",
    "HH": r"(?P<hour>[0-9]{2})",
    "mm": r"(?P<minute>[0-9]{2})",
}
_TOKEN_RE = re.compile("|".join(_TOKENS))
_MINUTES_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class _Pattern:
    regex: re.Pattern[str]
    has_time: bool

    @classmethod
    def compile(cls, pattern: str) -> _Pattern:
        pieces = []
        pos = 0
        for token in _TOKEN_RE.finditer(pattern):
            pieces.append(re.escape(pattern[pos:token.start()]))
            pieces.append(_TOKENS[token.group()])
            pos = token.end()
        pieces.append(re.escape(pattern[pos:]))
        return cls(re.compile("".join(pieces)), "HH" in pattern)

    def parse(self, text: str) -> datetime | None:
        match = self.regex.fullmatch(text)
        if match is None:
            return None
        fields = {name: int(value) for name, value in match.groupdict().items()}
        try:
            return datetime(
                fields["year"],
                fields["month"],
                fields["day"],
                fields.get("hour", 0),
                fields.get("minute", 0),
            )
        except ValueError:
            return None


_PATTERNS = tuple(_Pattern.compile(p) for p in DATE_PATTERNS)


def _parse_date_only(text: str) -> datetime | None:
    for pattern in _PATTERNS:
        if pattern.has_time:
            continue
        moment = pattern.parse(text)
        if moment is not None:
            return moment
    return None


def _parse_minutes(text: str) -> int | None:
    if not _MINUTES_RE.fullmatch(text):
        return None
    minutes = int(text)
    if not _INT32_MIN <= minutes <= _INT32_MAX:
        return None
    return minutes


def interpret_date(text: str) -> datetime | None:
    """Parse a date or date-time in one of the known layouts.

    A date may be followed by "HH:mm" or by a whole number of minutes
    past midnight. Returns None when nothing matches.
    """
    parts = [part for part in text.split(" ") if part]

    if len(parts) == 2:
        date_part, time_part = parts
        for pattern in _PATTERNS:
            moment = pattern.parse(text)
            if moment is not None:
                return moment
        minutes = _parse_minutes(time_part)
        if minutes is not None:
            day = _parse_date_only(date_part)
            if day is not None:
                try:
                    return day + timedelta(minutes=minutes)
                except OverflowError:
                    return None

    if len(parts) == 1:
        return _parse_date_only(parts[0])

    return None


class DataReader(ABC):
    """Loads a time series from a file of one kind."""

    name: str = ""

    @abstractmethod
    def load_from_file(self, file_path: str | Path) -> DataContainer:
        """Read the file; an unreadable file gives an empty series."""

    def interpret_date(self, text: str) -> datetime | None:
        """Parse a date the way every reader does."""
        return interpret_date(text)


def _reject_constant(name: str) -> float:
    raise ValueError(f"unsupported JSON constant {name}")


class JsonReader(DataReader):
    """Reads an array of objects each holding a date string and a number."""

    name = "json"

    def load_from_file(self, file_path: str | Path) -> DataContainer:
        result = DataContainer()
        try:
            raw = Path(file_path).read_bytes()
        except OSError:
            return result
        try:
            document = json.loads(raw, parse_constant=_reject_constant)
        except ValueError:
            return result
        if not isinstance(document, list):
            return result

        for entry in document:
            if not isinstance(entry, dict):
                continue
            moment: datetime | None = None
            value = 0.0
            have_value = False
            for _, item in sorted(entry.items()):
                if isinstance(item, str):
                    moment = self.interpret_date(item)
                elif isinstance(item, (int, float)) and not isinstance(item, bool):
                    value = float(item)
                    have_value = True
                if moment is not None and have_value:
                    result.append(moment, value)
        return result


def _to_text(cell: object) -> str:
    if cell is None:
        return ""
    if isinstance(cell, bytes):
        return cell.decode("utf-8", errors="replace")
    return str(cell)


def _to_number(cell: object) -> float | None:
    if isinstance(cell, (int, float)):
        return float(cell)
    if isinstance(cell, str):
        try:
            return float(cell.strip())
        except ValueError:
            return None
    return None


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class SqlReader(DataReader):
    """Reads the "time" and "value" columns of the first table of a database."""

    name = "sqlite"

    def load_from_file(self, file_path: str | Path) -> DataContainer:
        result = DataContainer()
        uri = Path(file_path).resolve().as_uri() + "?mode=ro"
        try:
            connection = sqlite3.connect(uri, uri=True)
        except sqlite3.Error:
            return result

        with closing(connection):
            try:
                tables = [
                    row[0]
                    for row in connection.execute(
                        "SELECT name FROM sqlite_master WHERE type = 'table' "
                        "AND name <> 'sqlite_sequence'"
                    )
                ]
                if not tables:
                    return result
                rows = connection.execute(
                    f"SELECT time, value FROM {_quote_identifier(tables[0])}"
                ).fetchall()
            except sqlite3.Error:
                return result

        for time_cell, value_cell in rows:
            moment = self.interpret_date(_to_text(time_cell))
            if moment is None:
                continue
            value = _to_number(value_cell)
            if value is not None:
                result.append(moment, value)
        return result