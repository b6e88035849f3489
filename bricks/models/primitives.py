"""
Shared primitive data types for the game core.

This module provides the basic geometric types used by every entity:
a 2D vector for positions and velocities, a size, and an axis-aligned
rectangle for overlap tests.
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Vector2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and offsets.

    Screen convention: x grows to the right, y grows downward, so an
    angle of -pi/2 points straight up.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> Vector2D(x=1.0, y=2.0) + Vector2D(x=3.0, y=4.0)
        Vector2D(x=4.0, y=6.0)
        >>> Vector2D.from_angle(0.0, 2.0)
        Vector2D(x=2.0, y=0.0)
    """
    x: float = 0.0
    y: float = 0.0

    model_config = ConfigDict(frozen=True)  # Immutable

    @classmethod
    def from_angle(cls, angle: float, magnitude: float = 1.0) -> 'Vector2D':
        """Build a vector pointing along angle (radians) with given length."""
        return cls(x=math.cos(angle) * magnitude, y=math.sin(angle) * magnitude)

    def add(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def subtract(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(x=self.x - other.x, y=self.y - other.y)

    def multiply(self, scalar: float) -> 'Vector2D':
        return Vector2D(x=self.x * scalar, y=self.y * scalar)

    def divide(self, scalar: float) -> 'Vector2D':
        """Divide both components by scalar.

        Raises:
            ZeroDivisionError: If scalar is zero
        """
        if scalar == 0:
            raise ZeroDivisionError('Division by zero')
        return Vector2D(x=self.x / scalar, y=self.y / scalar)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> 'Vector2D':
        """Unit vector in the same direction, or the zero vector."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2D()
        return self.divide(mag)

    def dot(self, other: 'Vector2D') -> float:
        return self.x * other.x + self.y * other.y

    def rotate(self, angle: float) -> 'Vector2D':
        """Rotate by angle radians around the origin."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector2D(
            x=self.x * cos - self.y * sin,
            y=self.x * sin + self.y * cos,
        )

    def clone(self) -> 'Vector2D':
        return Vector2D(x=self.x, y=self.y)

    def with_x(self, x: float) -> 'Vector2D':
        """Copy with a replaced x coordinate."""
        return Vector2D(x=x, y=self.y)

    def with_y(self, y: float) -> 'Vector2D':
        """Copy with a replaced y coordinate."""
        return Vector2D(x=self.x, y=y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return self.add(other)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return self.subtract(other)

    def __mul__(self, scalar: float) -> 'Vector2D':
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> 'Vector2D':
        return self.multiply(scalar)

    def __truediv__(self, scalar: float) -> 'Vector2D':
        return self.divide(scalar)

    def __neg__(self) -> 'Vector2D':
        return Vector2D(x=-self.x, y=-self.y)

    def __repr__(self) -> str:
        return f"Vector2D(x={self.x}, y={self.y})"

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Vector2D(x={self.x:.2f}, y={self.y:.2f})"


class Size(BaseModel):
    """Immutable width/height pair.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)
    """
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, dims: Tuple[float, float]) -> 'Size':
        """Build a Size from a (width, height) tuple."""
        return cls(width=dims[0], height=dims[1])

    def with_width(self, width: float) -> 'Size':
        return Size(width=width, height=self.height)


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Used for bounding boxes and collision detection. Position is at the
    top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle
        height: Height of rectangle

    Examples:
        >>> rect1 = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
        >>> rect2 = Rectangle(x=50.0, y=50.0, width=100.0, height=100.0)
        >>> rect1.intersects(rect2)
        True
    """
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Vector2D) -> bool:
        """Check if a point is inside or on the boundary of the rectangle."""
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps or touches another rectangle."""
        return not (self.right < other.left or
                    self.left > other.right or
                    self.bottom < other.top or
                    self.top > other.bottom)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
