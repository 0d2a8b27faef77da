"""Container kinds, orientations and directions used by layouts."""

from __future__ import annotations

from enum import Enum


class Orientation(Enum):
    """The axis along which a container arranges its children."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ContainerKind(Enum):
    """How a container lays out its children.

    ``HORIZONTAL`` is the default kind of a new container.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TABBED = "tabbed"
    STACKED = "stacked"

    @classmethod
    def from_orientation(cls, orientation: Orientation) -> "ContainerKind":
        """The split (non-group) kind along ``orientation``."""
        if orientation is Orientation.HORIZONTAL:
            return cls.HORIZONTAL
        if orientation is Orientation.VERTICAL:
            return cls.VERTICAL
        raise ValueError(f"not an orientation: {orientation!r}")

    @classmethod
    def group(cls, orientation: Orientation) -> "ContainerKind":
        """The group kind whose children are arranged along ``orientation``."""
        if orientation is Orientation.HORIZONTAL:
            return cls.TABBED
        if orientation is Orientation.VERTICAL:
            return cls.STACKED
        raise ValueError(f"not an orientation: {orientation!r}")

    def orientation(self) -> Orientation:
        if self in (ContainerKind.HORIZONTAL, ContainerKind.TABBED):
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    def is_group(self) -> bool:
        """Whether only one child is shown at a time (tabbed or stacked)."""
        return self in (ContainerKind.TABBED, ContainerKind.STACKED)


class Direction(Enum):
    """A direction for moving focus or nodes."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def orientation(self) -> Orientation:
        if self in (Direction.LEFT, Direction.RIGHT):
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL