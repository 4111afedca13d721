"""Renderers that draw a time series onto a matplotlib figure."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum

from matplotlib.axes import Axes
from matplotlib.dates import DateFormatter
from matplotlib.figure import Figure
from matplotlib.ticker import FormatStrFormatter, LinearLocator

from .datacontainer import DataContainer

AXIS_DATE_FORMAT = "%d.%m.%Y %H:%M"
PIXELS_PER_TICK = 100
DEFAULT_MAX_PIXELS = 1000


class GraphType(Enum):
    """The kinds of graph that can be drawn."""

    SCATTER = 0
    LINE = 1


def _setup_time_axis(ax: Axes, data: DataContainer, width: int) -> None:
    ax.xaxis.set_major_locator(LinearLocator(max(2, width // PIXELS_PER_TICK)))
    ax.xaxis.set_major_formatter(DateFormatter(AXIS_DATE_FORMAT))
    ax.tick_params(axis="x", labelrotation=45)
    ax.set_xlim(data.points[0][0], data.points[-1][0])


class Graph(ABC):
    """Draws a data series in one particular style."""

    name: str = ""
    graph_type: GraphType

    @abstractmethod
    def show(self, data: DataContainer, figure: Figure | None, width: int) -> Axes | None:
        """Draw the series on the figure, replacing what was there."""


class LineGraph(Graph):
    """Draws the series as a connected dark green line."""

    name = "Line Graph"
    graph_type = GraphType.LINE

    def show(self, data: DataContainer, figure: Figure | None, width: int) -> Axes | None:
        if figure is None or data.is_empty():
            return None

        y_min = sys.float_info.max
        y_max = sys.float_info.min
        moments = []
        values = []
        for moment, value in data:
            y_min = min(y_min, value)
            y_max = max(y_max, value)
            moments.append(moment)
            values.append(value)

        figure.clear()
        ax = figure.add_subplot()
        ax.plot(moments, values, color="darkgreen", linewidth=1)
        _setup_time_axis(ax, data, width)
        ax.set_ylim(y_min, y_max)
        return ax


class ScatterGraph(Graph):
    """Draws the series as green markers, thinned to fit the width."""

    name = "Scatter"
    graph_type = GraphType.SCATTER

    def show(self, data: DataContainer, figure: Figure | None, width: int) -> Axes | None:
        if data.is_empty():
            raise ValueError("cannot draw a scatter graph of an empty series")
        if figure is None:
            return None

        points = data.points
        max_pixels = width if width > 0 else DEFAULT_MAX_PIXELS
        step = max(1, len(points) // max_pixels)
        sampled = points[::step]

        min_y = max_y = points[0][1]
        for _, value in sampled:
            min_y = min(min_y, value)
            max_y = max(max_y, value)

        figure.clear()
        ax = figure.add_subplot()
        ax.scatter(
            [moment for moment, _ in sampled],
            [value for _, value in sampled],
            s=25,
            c="green",
            linewidths=1,
        )
        _setup_time_axis(ax, data, width)
        ax.yaxis.set_major_formatter(FormatStrFormatter("%.2f"))
        ax.set_ylim(min_y, max_y)
        ax.yaxis.grid(True)
        return ax