"""
Drawing sinks for sampled curves.

A canvas accepts points in the y-up plane through two operations:
    draw_point(point, radius, color)
    draw_line(point_a, point_b, color)
Matplotlib or plotly library is used as backend.
"""
from abc import ABC, abstractmethod
from typing import *

import plotly.offline as pl
import plotly.graph_objs as go

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from qspline.geometry import Point, make_points


class Canvas(ABC):
    """
    Base of the drawing sinks.

    With `flip_y` the y coordinate is mapped to `height - y`, i.e. the canvas
    draws into a raster frame with y axis pointing down.
    """
    default_ext = None
    # File extension written by `save`.

    def __init__(self, height: float = None, flip_y: bool = False):
        if flip_y and height is None:
            raise ValueError("Canvas height is needed to flip the y axis.")
        self.height = height
        self.flip_y = flip_y

    def _map(self, point) -> Tuple[float, float]:
        x, y = point
        if self.flip_y:
            y = self.height - y
        return x, y

    @abstractmethod
    def draw_point(self, point: Point, radius: float = 1.0, color: str = None):
        pass

    @abstractmethod
    def draw_line(self, point_a: Point, point_b: Point, color: str = None):
        pass


class MatplotlibCanvas(Canvas):
    default_ext = "pdf"

    def __init__(self, height=None, flip_y=False, ax=None):
        super().__init__(height, flip_y)
        if ax is None:
            self.fig, self.ax = plt.subplots()
        else:
            self.fig, self.ax = ax.figure, ax
        self.ax.set_aspect('equal', adjustable='datalim')

    def draw_point(self, point, radius=1.0, color=None):
        patch = Circle(self._map(point), radius, color=color)
        self.ax.add_patch(patch)
        self.ax.autoscale_view()
        return patch

    def draw_line(self, point_a, point_b, color=None):
        (xa, ya), (xb, yb) = self._map(point_a), self._map(point_b)
        line, = self.ax.plot([xa, xb], [ya, yb], color=color)
        return line

    def save(self, fname):
        self.fig.savefig(fname)

    def show(self):
        plt.show()


class PlotlyCanvas(Canvas):
    default_ext = "html"

    def __init__(self, height=None, flip_y=False):
        super().__init__(height, flip_y)
        self.data_2d = []

    def draw_point(self, point, radius=1.0, color=None):
        x, y = self._map(point)
        marker = dict(size=2 * radius, color=color)
        self.data_2d.append(go.Scatter(x=[x], y=[y], mode='markers', marker=marker, showlegend=False))

    def draw_line(self, point_a, point_b, color=None):
        (xa, ya), (xb, yb) = self._map(point_a), self._map(point_b)
        self.data_2d.append(go.Scatter(x=[xa, xb], y=[ya, yb], mode='lines', line=dict(color=color),
                                       showlegend=False))

    def figure(self):
        return go.Figure(data=self.data_2d)

    def save(self, fname):
        """
        Write the figure into a standalone HTML file.
        """
        pl.plot(self.figure(), filename=fname, auto_open=False)

    def show(self):
        """
        Show added plots and clear the list for other plotting.
        """
        pl.plot(self.figure(), filename='qspline_plot_2d.html')
        self.data_2d = []


def make_canvas(backend: str = 'matplotlib', **kwargs) -> Canvas:
    backends = {'matplotlib': MatplotlibCanvas, 'plotly': PlotlyCanvas}
    if backend not in backends:
        raise ValueError(f"Unknown drawing backend: {backend}, available: {list(backends)}")
    return backends[backend](**kwargs)


def draw_points(canvas: Canvas, points: Iterable, lines: bool = True, markers: bool = False,
                line_color: str = 'red', marker_color: str = 'green', radius: float = 4):
    """
    Draw a polyline.
    :param canvas: drawing sink with draw_line and draw_point methods
    :param points: sequence of points (x, y)
    :param lines: connect consecutive points by lines
    :param markers: mark every point by a disc of given radius
    """
    points = make_points(points)
    if lines:
        for current, next_pt in zip(points[:-1], points[1:]):
            canvas.draw_line(current, next_pt, line_color)
    if markers:
        for point in points:
            canvas.draw_point(point, radius, marker_color)
