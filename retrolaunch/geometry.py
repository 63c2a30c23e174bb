"""Small value types: vectors, rectangles, colours and aspect ratios."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import gcd

__all__ = ["Vector2", "Rectangle", "Color", "Colors", "Proportion"]


@dataclass
class Vector2:
    """A two-dimensional point or size."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"Vector2(x: {self.x:f}, y: {self.y:f})"

    def int_x(self) -> int:
        """The x coordinate truncated towards zero."""
        return int(self.x)

    def int_y(self) -> int:
        """The y coordinate truncated towards zero."""
        return int(self.y)


@dataclass
class Rectangle:
    """An axis-aligned rectangle given by its corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_position_size(cls, position: Vector2, size: Vector2) -> Rectangle:
        """Build a rectangle from a corner position and a size vector."""
        return cls(position.x, position.y, size.x, size.y)

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    @property
    def position(self) -> Vector2:
        """The corner of the rectangle as a vector."""
        return Vector2(self.x, self.y)

    def __str__(self) -> str:
        return (
            f"Rectangle( x: {self.x:f}, y: {self.y:f}, "
            f"width: {self.width:f}, height: {self.height:f})"
        )


_PALETTE: dict[str, tuple[int, int, int, int]] = {
    "lightgray": (200, 200, 200, 255),
    "gray": (130, 130, 130, 255),
    "darkgray": (80, 80, 80, 255),
    "yellow": (253, 249, 0, 255),
    "gold": (255, 203, 0, 255),
    "orange": (255, 161, 0, 255),
    "pink": (255, 109, 194, 255),
    "red": (230, 41, 55, 255),
    "maroon": (190, 33, 55, 255),
    "green": (0, 228, 48, 255),
    "lime": (0, 158, 47, 255),
    "darkgreen": (0, 117, 44, 255),
    "skyblue": (102, 191, 255, 255),
    "blue": (0, 121, 241, 255),
    "darkblue": (0, 82, 172, 255),
    "purple": (200, 122, 255, 255),
    "violet": (135, 60, 190, 255),
    "darkpurple": (112, 31, 126, 255),
    "beige": (211, 176, 131, 255),
    "brown": (127, 106, 79, 255),
    "darkbrown": (76, 63, 47, 255),
    "white": (255, 255, 255, 255),
    "black": (0, 0, 0, 255),
    "blank": (0, 0, 0, 0),
    "magenta": (255, 0, 255, 255),
    "raywhite": (245, 245, 245, 255),
}


@dataclass
class Color:
    """An RGBA colour with 8-bit channels; white by default."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def named(cls, name: str) -> Color:
        """Look up a palette colour by name, ignoring case and underscores."""
        key = name.replace("_", "").replace(" ", "").lower()
        try:
            return cls(*_PALETTE[key])
        except KeyError:
            raise ValueError(f"unknown colour name: {name!r}") from None

    def __str__(self) -> str:
        return f"Color(red: {self.r}, green: {self.g}, blue: {self.b}, alpha: {self.a})"


def _clamp_channel(value: int) -> int:
    return max(0, min(255, value))


@dataclass
class Colors:
    """A colour whose channels may leave 0..255 while animating.

    The raw channel values are kept; the drawable colour holds them clamped.
    Values given at construction are wrapped into a byte instead.
    """

    red: int = 255
    green: int = 255
    blue: int = 255
    alpha: int = 255
    _color: Color = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._color = Color(self.red & 0xFF, self.green & 0xFF, self.blue & 0xFF, self.alpha & 0xFF)

    def set_color(self, red: int, green: int, blue: int, alpha: int | None = None) -> None:
        """Set the channels; alpha is kept when not given."""
        self.red = red
        self.green = green
        self.blue = blue
        if alpha is not None:
            self.alpha = alpha
        self._update()

    def set_alpha(self, alpha: int) -> None:
        self.alpha = alpha
        self._update()

    @property
    def color(self) -> Color:
        """The drawable colour."""
        return Color(self._color.r, self._color.g, self._color.b, self._color.a)

    def _update(self) -> None:
        self._color = Color(
            _clamp_channel(self.red),
            _clamp_channel(self.green),
            _clamp_channel(self.blue),
            _clamp_channel(self.alpha),
        )


class Proportion:
    """The aspect ratio of a width and height, also in lowest terms."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.proportion = 0.0
        self.simplified_width = 0
        self.simplified_height = 0
        self.set_proportion(width, height)

    def set_proportion(self, width: int, height: int) -> None:
        """Recompute the ratio unless a dimension matches the current one or is not positive."""
        if (
            width != self.simplified_width
            and height != self.simplified_height
            and width > 0
            and height > 0
        ):
            divisor = gcd(width, height)
            self.proportion = width / height
            self.simplified_width = width // divisor
            self.simplified_height = height // divisor

    def __str__(self) -> str:
        return f"{self.simplified_width}:{self.simplified_height}"