import json
import sqlite3

import pytest
from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from plotviewer.graphfactory import GraphFactory
from plotviewer.graphs import GraphType
from plotviewer.mainwindow import ChartSession, EmptyFileError, NoRendererError
from plotviewer.readerfactory import ReaderFactory


@pytest.fixture
def session():
    return ChartSession(GraphFactory(), ReaderFactory())


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "series.json"
    path.write_text(
        json.dumps(
            [
                {"time": "01.02.2024 10:30", "value": 5},
                {"time": "02.02.2024 11:00", "value": 7.5},
            ]
        )
    )
    return path


class _NoGraphs:
    def graphs(self):
        return []

    def get_graph(self, graph_type):
        return None


def test_graph_choices_list_builtin_graphs(session):
    choices = dict(session.graph_choices())
    assert choices == {"Line Graph": GraphType.LINE, "Scatter": GraphType.SCATTER}


def test_default_graph_is_first_choice(session):
    assert session.graph_type == session.graph_choices()[0][1]


def test_name_filters_follow_reader_extensions(session):
    assert session.name_filters() == ["*.json", "*.sqlite"]


def test_unknown_extension_is_ignored(session, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    assert session.load(path) is None
    assert session.data.is_empty()
    assert session.save_enabled is False


def test_load_json_enables_controls(session, json_file):
    data = session.load(json_file)
    assert len(data) == 2
    assert [value for _, value in data] == [5.0, 7.5]
    assert session.save_enabled is True
    assert session.monochrome_available is True


def test_extension_case_is_ignored(session, tmp_path, json_file):
    upper = tmp_path / "SERIES.JSON"
    upper.write_bytes(json_file.read_bytes())
    assert len(session.load(upper)) == 2


def test_empty_file_raises_and_disables_controls(session, tmp_path, json_file):
    session.load(json_file)
    empty = tmp_path / "empty.json"
    empty.write_text("[]")
    with pytest.raises(EmptyFileError):
        session.load(empty)
    assert session.data.is_empty()
    assert session.save_enabled is False
    assert session.monochrome_available is False


def test_missing_renderer_raises(tmp_path, json_file):
    session = ChartSession(_NoGraphs(), ReaderFactory())
    with pytest.raises(NoRendererError):
        session.load(json_file)
    assert session.save_enabled is False


def test_load_sqlite(session, tmp_path):
    path = tmp_path / "series.sqlite"
    with sqlite3.connect(path) as connection:
        connection.execute("CREATE TABLE readings (time TEXT, value REAL)")
        connection.executemany(
            "INSERT INTO readings VALUES (?, ?)",
            [("2024-01-01 00:00", 1.0), ("2024-01-02 00:00", 2.0)],
        )
    connection.close()
    data = session.load(path)
    assert [value for _, value in data] == [1.0, 2.0]


def test_render_without_data_draws_nothing(session):
    assert session.render(Figure(), 800) is None


def test_render_line_graph(session, json_file):
    session.load(json_file)
    session.select_graph(GraphType.LINE)
    ax = session.render(Figure(), 800)
    assert len(ax.lines) == 1
    assert list(ax.lines[0].get_ydata()) == [5.0, 7.5]


def test_render_scatter_graph(session, json_file):
    session.load(json_file)
    session.select_graph(GraphType.SCATTER)
    ax = session.render(Figure(), 800)
    assert len(ax.lines) == 0
    assert len(ax.collections) == 1
    assert len(ax.collections[0].get_offsets()) == 2


def test_monochrome_turns_line_black_and_back(session, json_file):
    session.load(json_file)
    session.select_graph(GraphType.LINE)
    figure = Figure()
    session.set_monochrome(True)
    ax = session.render(figure, 800)
    assert to_hex(ax.lines[0].get_color()) == to_hex("black")
    session.set_monochrome(False)
    ax = session.render(figure, 800)
    assert to_hex(ax.lines[0].get_color()) == to_hex("darkgreen")


def test_save_pdf_writes_pdf(session, json_file, tmp_path):
    session.load(json_file)
    figure = Figure()
    session.render(figure, 800)
    target = tmp_path / "chart.pdf"
    assert session.save_pdf(figure, target) == target
    assert target.read_bytes().startswith(b"%PDF")


def test_save_pdf_with_empty_path_does_nothing(session, tmp_path):
    assert session.save_pdf(Figure(), "") is None
    assert list(tmp_path.iterdir()) == []