"""Figures of a plot whose coordinates follow the plot's size."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import ClassVar

from .geometry import AffineCoordinate, AffinePoint


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _join(items) -> str:
    return ", ".join(str(item) for item in items)


@dataclass
class Polyline:
    """Points of a broken line with a mask of points a preview may skip."""

    points: list[AffinePoint] = field(default_factory=list)
    preview_mask: list[bool] = field(default_factory=list)
    preview_count: int = 0

    def __str__(self) -> str:
        mask = ", ".join(_flag(flag) for flag in self.preview_mask)
        return (
            f"Polyline(points: [{_join(self.points)}], previewMask: [{mask}], "
            f"previewCount: {self.preview_count})"
        )


class FigureKind(enum.Enum):
    """The kinds of figure a plot can hold."""

    CIRCLE = enum.auto()
    LINE = enum.auto()
    PATH = enum.auto()
    POLYGON = enum.auto()
    POLYLINE = enum.auto()
    RASTER = enum.auto()
    RECTANGLE = enum.auto()
    TEXT = enum.auto()


class Figure(abc.ABC):
    """A drawable element of a plot."""

    kind: ClassVar[FigureKind]

    @abc.abstractmethod
    def __str__(self) -> str:
        """A readable description of the figure."""


@dataclass(frozen=True)
class CircleFigure(Figure):
    """A circle; masked circles may be left out of a preview."""

    kind: ClassVar[FigureKind] = FigureKind.CIRCLE

    center: AffinePoint
    radius: AffineCoordinate
    stroke_index: int
    color_index: int
    fill_index: int
    is_masked: bool = False

    def __str__(self) -> str:
        return (
            f"CircleFigure(center: {self.center}, radius: {self.radius}, "
            f"strokeIndex: {self.stroke_index}, colorIndex: {self.color_index}, "
            f"fillIndex: {self.fill_index}, isMasked: {_flag(self.is_masked)})"
        )


@dataclass(frozen=True)
class LineFigure(Figure):
    """A straight segment."""

    kind: ClassVar[FigureKind] = FigureKind.LINE

    start: AffinePoint
    end: AffinePoint
    stroke_index: int
    color_index: int

    def __str__(self) -> str:
        return (
            f"LineFigure(from: {self.start}, to: {self.end}, "
            f"strokeIndex: {self.stroke_index}, colorIndex: {self.color_index})"
        )


@dataclass(frozen=True)
class PathFigure(Figure):
    """A path made of several closed sub-paths."""

    kind: ClassVar[FigureKind] = FigureKind.PATH

    sub_paths: tuple[Polyline, ...]
    winding: bool
    stroke_index: int
    color_index: int
    fill_index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "sub_paths", tuple(self.sub_paths))

    def __str__(self) -> str:
        return (
            f"PathFigure(subPaths: [{_join(self.sub_paths)}], "
            f"winding: {_flag(self.winding)}, strokeIndex: {self.stroke_index}, "
            f"colorIndex: {self.color_index}, fillIndex: {self.fill_index})"
        )


@dataclass(frozen=True)
class PolygonFigure(Figure):
    """A closed, possibly filled polygon."""

    kind: ClassVar[FigureKind] = FigureKind.POLYGON

    polyline: Polyline
    stroke_index: int
    color_index: int
    fill_index: int

    def __str__(self) -> str:
        return (
            f"PolygonFigure(polyline: {self.polyline}, "
            f"strokeIndex: {self.stroke_index}, colorIndex: {self.color_index}, "
            f"fillIndex: {self.fill_index})"
        )


@dataclass(frozen=True)
class PolylineFigure(Figure):
    """An open broken line."""

    kind: ClassVar[FigureKind] = FigureKind.POLYLINE

    polyline: Polyline
    stroke_index: int
    color_index: int

    def __str__(self) -> str:
        return (
            f"PolylineFigure(polyline: {self.polyline}, "
            f"strokeIndex: {self.stroke_index}, colorIndex: {self.color_index})"
        )


@dataclass(frozen=True)
class RectangleFigure(Figure):
    """An axis-aligned rectangle between two corners."""

    kind: ClassVar[FigureKind] = FigureKind.RECTANGLE

    start: AffinePoint
    end: AffinePoint
    stroke_index: int
    color_index: int
    fill_index: int

    def __str__(self) -> str:
        return (
            f"RectangleFigure(from: {self.start}, to: {self.end}, "
            f"strokeIndex: {self.stroke_index}, colorIndex: {self.color_index}, "
            f"fillIndex: {self.fill_index})"
        )


@dataclass(frozen=True)
class TextFigure(Figure):
    """A text label; angle in degrees, anchor between 0 and 1."""

    kind: ClassVar[FigureKind] = FigureKind.TEXT

    text: str
    position: AffinePoint
    angle: float
    anchor: float
    font_index: int
    color_index: int

    def __str__(self) -> str:
        return (
            f"TextFigure(text: '{self.text}', position: {self.position}, "
            f"angle: {self.angle:g}, anchor: {self.anchor:g}, "
            f"fontIndex: {self.font_index}, colorIndex: {self.color_index})"
        )