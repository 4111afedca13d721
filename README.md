# plotviewer

A small desktop viewer for time series files. Pick a folder, click a file,
and its data is drawn as a line or scatter chart. The chart can be switched
to a black-and-white style and saved as a PDF.

## Installing

```
pip install .
```

The window is built with Tkinter, which ships with most Python
installations; on some Linux distributions it is a separate system package
(often called `python3-tk`).

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
plotviewer
```

The window opens on your home folder. It lists only the files that one of
the readers understands (`*.json` and `*.sqlite`). Use **Open folder** to
browse somewhere else, then click a file to plot it. The drop-down chooses
the chart type (**Line Graph** or **Scatter**); **Black and white** and
**Save chart** become available once a chart is shown. A file with no usable
points clears the chart and shows a warning.

The line chart joins every point. The scatter chart thins the points to
about one per pixel of the chart's width, so very long series stay quick to
draw.

## Input formats

**JSON** — an array of objects. In each object a string value is read as the
timestamp and a numeric value as the measurement:

```json
[
  {"time": "01.02.2024 10:30", "value": 12.5},
  {"time": "2024-02-01 11:00", "value": 13.1}
]
```

The values of an object are looked at in alphabetical order of their keys.
Once both a valid timestamp and a number have been seen, a point is
recorded, and each further value in the same object records another point
with the latest pair. Entries that are not objects are skipped, and a file
that is not valid JSON or not an array gives no points.

**SQLite** — the database is opened read-only and its first table is
queried for its `time` and `value` columns. Rows whose time cannot be
understood or whose value is not a number are skipped. A database without
tables, or whose first table lacks those columns, gives no points.

Timestamps may be written in any of these forms, with or without a
`HH:mm` time:

| date form    | example            |
|--------------|--------------------|
| `dd.MM.yyyy` | `01.02.2024 10:30` |
| `yyyy.MM.dd` | `2024.02.01`       |
| `dd-MM-yyyy` | `01-02-2024 10:30` |
| `yyyy-MM-dd` | `2024-02-01`       |

A date followed by a plain integer, such as `2024-02-01 90`, is read as that
many minutes after midnight.

## Using it from Python

The readers, chart types and the session that ties them together can be
used without the window:

```python
from matplotlib.figure import Figure

from plotviewer.graphfactory import GraphFactory
from plotviewer.graphs import LineGraph, ScatterGraph
from plotviewer.mainwindow import ChartSession
from plotviewer.readerfactory import ReaderFactory
from plotviewer.readers import JsonReader, SqlReader

readers = ReaderFactory([JsonReader(), SqlReader()])
graphs = GraphFactory([LineGraph(), ScatterGraph()])

session = ChartSession(graphs, readers)
session.load("measurements.json")

figure = Figure()
session.render(figure, 800)
session.save_pdf(figure, "measurements.pdf")
```

- `ChartSession.load` returns the loaded `DataContainer`, or `None` when no
  reader handles the file's extension. It raises `EmptyFileError` when the
  file gives no points.
- `ChartSession.select_graph(GraphType.SCATTER)` switches the chart type and
  `ChartSession.set_monochrome(True)` draws the next render in black and
  white.
- `readers.extensions()` lists the file extensions that can be opened and
  `graphs.graphs()` the available chart types. Both factories always include
  the JSON and SQLite readers and the line and scatter graphs.
- A single timestamp can be parsed with `plotviewer.readers.interpret_date`,
  which returns a `datetime` or `None`.

The `plotviewer` command wires these pieces together through
`plotviewer.appsetup.AppSetup` and the small dependency container in
`plotviewer.container.IocContainer`, which can also be used directly:

```python
from plotviewer.appsetup import AppSetup
from plotviewer.readerfactory import ReaderFactory
from plotviewer.readers import JsonReader, SqlReader

setup = AppSetup()
setup.configure_readers(JsonReader, SqlReader)
reader_factory = setup.container.resolve(ReaderFactory)
```

Resolving something that was never bound raises
`plotviewer.container.ResolutionError`.