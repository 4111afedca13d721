"""Application wiring of readers and graphs."""

from __future__ import annotations

from .container import IocContainer


class AppSetup:
    """Holds the container and registers the reader and graph types."""

    def __init__(self) -> None:
        self.container = IocContainer()

    def configure_readers(self, *args: type) -> None:
        """Register the reader types the application offers."""
        self.container.setup_readers(*args)

    def configure_graphs(self, *args: type) -> None:
        """Register the graph types the application offers."""
        self.container.setup_graphs(*args)