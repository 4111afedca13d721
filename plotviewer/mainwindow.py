"""The chart viewer window and the state behind it."""

from __future__ import annotations

import argparse
import fnmatch
from pathlib import Path
from typing import Any

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .appsetup import AppSetup
from .datacontainer import DataContainer
from .graphfactory import GraphFactory
from .graphs import GraphType, LineGraph, ScatterGraph
from .readerfactory import ReaderFactory
from .readers import JsonReader, SqlReader

WINDOW_TITLE = "printingGraphs"
MIN_WIDTH, MIN_HEIGHT = 800, 600
MONOCHROME_COLOR = "black"
MONOCHROME_BACKGROUND = "white"


class EmptyFileError(ValueError):
    """Raised when a file was read but held no data points."""


class NoRendererError(LookupError):
    """Raised when no renderer exists for the selected graph type."""


def _apply_monochrome(ax: Axes) -> None:
    ax.figure.set_facecolor(MONOCHROME_BACKGROUND)
    ax.set_facecolor(MONOCHROME_BACKGROUND)
    for line in ax.lines:
        line.set_color(MONOCHROME_COLOR)
    for collection in ax.collections:
        collection.set_facecolor(MONOCHROME_COLOR)
        collection.set_edgecolor(MONOCHROME_COLOR)
    for spine in ax.spines.values():
        spine.set_edgecolor(MONOCHROME_COLOR)
    ax.tick_params(colors=MONOCHROME_COLOR)


def _matching_files(directory: Path, filters: list[str]) -> list[Path]:
    patterns = [pattern.lower() for pattern in filters]
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name.lower())
    except OSError:
        return []
    return [
        entry
        for entry in entries
        if entry.is_file()
        and any(fnmatch.fnmatchcase(entry.name.lower(), pattern) for pattern in patterns)
    ]


class ChartSession:
    """The loaded data, the chosen graph and the display options."""

    def __init__(self, graph_factory: GraphFactory, reader_factory: ReaderFactory) -> None:
        self.graph_factory = graph_factory
        self.reader_factory = reader_factory
        self.data = DataContainer()
        choices = self.graph_choices()
        self.graph_type: GraphType | None = choices[0][1] if choices else None
        self.monochrome = False
        self.save_enabled = False
        self.monochrome_available = False

    def graph_choices(self) -> list[tuple[str, GraphType]]:
        """Return (name, type) for every graph that can be selected."""
        return [(graph.name, graph.graph_type) for graph in self.graph_factory.graphs()]

    def name_filters(self) -> list[str]:
        """Return the file name patterns of the readable files."""
        return ["*." + ext for ext in self.reader_factory.extensions()]

    def _disable_controls(self) -> None:
        self.save_enabled = False
        self.monochrome_available = False

    def load(self, path: str | Path) -> DataContainer | None:
        """Read a file with the reader for its extension.

        Returns None when no reader handles the extension. Raises
        EmptyFileError when the file gives no points and NoRendererError
        when the selected graph type has no renderer.
        """
        path = Path(path)
        reader = self.reader_factory.get_reader(path.suffix.lstrip("."))
        if reader is None:
            return None
        self.data = reader.load_from_file(path)
        if self.data.is_empty():
            self._disable_controls()
            raise EmptyFileError(f"the file is empty: {path}")
        if self.graph_type is None or self.graph_factory.get_graph(self.graph_type) is None:
            self._disable_controls()
            raise NoRendererError(f"can't read this file: {path}")
        self.save_enabled = True
        self.monochrome_available = True
        return self.data

    def select_graph(self, graph_type: GraphType) -> None:
        """Choose the kind of graph to draw."""
        self.graph_type = graph_type

    def set_monochrome(self, enabled: bool) -> None:
        """Switch black-and-white drawing on or off."""
        self.monochrome = bool(enabled)

    def render(self, figure: Figure, width: int) -> Axes | None:
        """Draw the loaded data; None when there is nothing to draw."""
        if self.data.is_empty() or self.graph_type is None:
            return None
        renderer = self.graph_factory.get_graph(self.graph_type)
        if renderer is None:
            return None
        ax = renderer.show(self.data, figure, width)
        if ax is not None and self.monochrome:
            _apply_monochrome(ax)
        return ax

    def save_pdf(self, figure: Figure, path: str | Path) -> Path | None:
        """Write the figure to a PDF file; nothing happens for an empty path."""
        if not str(path):
            return None
        target = Path(path)
        figure.savefig(target, format="pdf")
        return target


class MainWindow:
    """A window listing data files of a folder next to a chart of the chosen one."""

    def __init__(
        self,
        graph_factory: GraphFactory,
        reader_factory: ReaderFactory,
        root: Any = None,
    ) -> None:
        import tkinter as tk
        from tkinter import filedialog, messagebox, ttk

        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

        self._tk = tk
        self._filedialog = filedialog
        self._messagebox = messagebox
        self.session = ChartSession(graph_factory, reader_factory)
        self.root = root if root is not None else tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.minsize(MIN_WIDTH, MIN_HEIGHT)

        settings = ttk.Frame(self.root)
        settings.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)
        ttk.Button(settings, text="Open folder", command=self.choose_folder).pack(side=tk.LEFT)
        ttk.Label(settings, text="Choose charts:").pack(side=tk.LEFT, padx=(5, 0))
        self._choices = self.session.graph_choices()
        self._chart_box = ttk.Combobox(
            settings, state="readonly", values=[name for name, _ in self._choices]
        )
        if self._choices:
            self._chart_box.current(0)
        self._chart_box.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=5)
        self._chart_box.bind("<<ComboboxSelected>>", self._on_graph_selected)

        self._monochrome = tk.BooleanVar(value=False)
        self._monochrome_check = ttk.Checkbutton(
            settings,
            text="Black and white",
            variable=self._monochrome,
            command=self._on_monochrome_toggled,
            state=tk.DISABLED,
        )
        self._monochrome_check.pack(side=tk.LEFT, padx=5)
        self._save_button = ttk.Button(
            settings, text="Save chart", command=self.export_pdf, state=tk.DISABLED
        )
        self._save_button.pack(side=tk.LEFT)

        self._status = ttk.Label(self.root, anchor=tk.W)
        self._status.pack(side=tk.BOTTOM, fill=tk.X)

        panes = ttk.PanedWindow(self.root, orient=tk.HORIZONTAL)
        panes.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self._file_list = tk.Listbox(panes, selectmode=tk.SINGLE, exportselection=False)
        panes.add(self._file_list, weight=0)
        self.figure = Figure()
        self._canvas = FigureCanvasTkAgg(self.figure, master=panes)
        chart_widget = self._canvas.get_tk_widget()
        panes.add(chart_widget, weight=1)

        self._files: list[Path] = []
        self._file_list.bind("<<ListboxSelect>>", self._on_file_selected)
        chart_widget.bind("<Configure>", self._on_resize, add="+")

        self.show_folder(Path.home())

    def _chart_width(self) -> int:
        return self._canvas.get_tk_widget().winfo_width()

    def _redraw(self) -> None:
        if self.session.render(self.figure, self._chart_width()) is not None:
            self._canvas.draw_idle()

    def _sync_controls(self) -> None:
        tk = self._tk
        self._save_button.configure(state=tk.NORMAL if self.session.save_enabled else tk.DISABLED)
        self._monochrome_check.configure(
            state=tk.NORMAL if self.session.monochrome_available else tk.DISABLED
        )

    def choose_folder(self) -> None:
        """Ask for a folder and list its data files."""
        directory = self._filedialog.askdirectory(parent=self.root, title="Choose folder")
        if directory:
            self.show_folder(directory)

    def show_folder(self, directory: str | Path) -> None:
        """List the readable files of a folder."""
        directory = Path(directory)
        self._files = _matching_files(directory, self.session.name_filters())
        self._file_list.delete(0, self._tk.END)
        for entry in self._files:
            self._file_list.insert(self._tk.END, entry.name)
        self._status.configure(text=f"Current dir: {directory}")

    def open_file(self, path: str | Path) -> None:
        """Load a file and draw it with the selected graph."""
        try:
            data = self.session.load(path)
        except EmptyFileError:
            self.figure.clear()
            self._canvas.draw_idle()
            self._messagebox.showwarning("ERROR", "the file is empty!", parent=self.root)
            self._sync_controls()
            return
        except NoRendererError:
            self._messagebox.showwarning("ERROR", "can't read this file!", parent=self.root)
            self._sync_controls()
            return
        if data is None:
            return
        self._redraw()
        self._sync_controls()

    def export_pdf(self) -> None:
        """Ask for a file name and save the chart there as PDF."""
        path = self._filedialog.asksaveasfilename(
            parent=self.root,
            title="Save to...",
            filetypes=[("PDF", "*.pdf")],
            defaultextension=".pdf",
        )
        if path:
            self.session.save_pdf(self.figure, path)

    def _on_file_selected(self, _event: Any = None) -> None:
        selection = self._file_list.curselection()
        if selection:
            self.open_file(self._files[selection[0]])

    def _on_graph_selected(self, _event: Any = None) -> None:
        index = self._chart_box.current()
        if 0 <= index < len(self._choices):
            self.session.select_graph(self._choices[index][1])
            self._redraw()

    def _on_monochrome_toggled(self) -> None:
        self.session.set_monochrome(self._monochrome.get())
        self._redraw()

    def _on_resize(self, _event: Any = None) -> None:
        self._redraw()


def main(argv: list[str] | None = None) -> int:
    """Start the chart viewer."""
    parser = argparse.ArgumentParser(
        prog="plotviewer", description="Show time series from JSON and SQLite files as charts."
    )
    parser.parse_args(argv)

    setup = AppSetup()
    setup.configure_readers(JsonReader, SqlReader)
    setup.configure_graphs(LineGraph, ScatterGraph)
    reader_factory = setup.container.resolve(ReaderFactory)
    graph_factory = setup.container.resolve(GraphFactory)

    window = MainWindow(graph_factory, reader_factory)
    window.root.mainloop()
    return 0