"""A small dependency-injection container."""

from __future__ import annotations

from typing import Any, Callable, Hashable

from .graphfactory import GraphFactory
from .readerfactory import ReaderFactory


class ResolutionError(KeyError):
    """Raised when nothing is bound for a requested interface."""


class IocContainer:
    """Binds interfaces to factories and resolves them on request."""

    def __init__(self) -> None:
        self._factories: dict[Hashable, Callable[[], Any]] = {}

    def resolve(self, interface: Hashable) -> Any:
        """Build or fetch the object bound to an interface."""
        try:
            factory = self._factories[interface]
        except KeyError:
            raise ResolutionError(interface) from None
        return factory()

    def bind_functor(self, interface: Hashable, fn: Callable[..., Any], *args: Hashable) -> None:
        """Bind an interface to a callable fed with the resolved dependencies."""

        def factory() -> Any:
            return fn(*(self.resolve(dependency) for dependency in args))

        self._factories[interface] = factory

    def bind_instance(self, interface: Hashable, instance: Any) -> None:
        """Bind an interface to one shared object."""
        self._factories[interface] = lambda: instance

    def bind_factory(self, interface: Hashable, concrete: Callable[..., Any], *args: Hashable) -> None:
        """Bind an interface to a new concrete object on every resolution."""
        self.bind_functor(interface, concrete, *args)

    def setup_readers(self, *args: type) -> None:
        """Register reader types and a ReaderFactory built from them."""
        for reader_type in args:
            self.bind_factory(reader_type, reader_type)
        self.bind_functor(ReaderFactory, lambda *readers: ReaderFactory(readers), *args)

    def setup_graphs(self, *args: type) -> None:
        """Register graph types and a GraphFactory built from them."""
        for graph_type in args:
            self.bind_factory(graph_type, graph_type)
        self.bind_functor(GraphFactory, lambda *graphs: GraphFactory(graphs), *args)