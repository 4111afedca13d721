"""A time series of (moment, value) points."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator


@dataclass
class DataContainer:
    """An ordered series of (moment, value) points."""

    points: list[tuple[datetime, float]] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when the series holds no points."""
        return not self.points

    def clear(self) -> None:
        """Remove every point."""
        self.points.clear()

    def append(self, moment: datetime, value: float) -> None:
        """Add a point at the end of the series."""
        self.points.append((moment, float(value)))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[tuple[datetime, float]]:
        return iter(self.points)