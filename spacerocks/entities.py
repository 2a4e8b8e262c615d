"""Game objects and the id-keyed collection that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Protocol, Tuple, TypeVar

from .geometry import Vec2, wrap_position

Color = Tuple[int, int, int, int]


@dataclass
class CircleShape:
    """A moving circle."""

    position: Vec2
    radius: float
    color: Color
    velocity: Vec2 = field(default_factory=Vec2)


@dataclass
class Shot:
    """A projectile fired by the player; ``timer`` is its remaining lifetime."""

    id: int
    shape: CircleShape
    timer: float


@dataclass
class Asteroid:
    """An asteroid drifting across the screen."""

    shape: CircleShape
    id: int


class _HasId(Protocol):
    id: int


T = TypeVar("T", bound=_HasId)


class IdList(Generic[T]):
    """An ordered collection of items looked up by their ``id``."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item_id: object) -> bool:
        return any(item.id == item_id for item in self._items)

    def append(self, item: T) -> None:
        """Add an item at the end."""
        self._items.append(item)

    def index_of(self, item_id: int) -> int:
        """Return the position of the first item with ``item_id``."""
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise KeyError(item_id)

    def get(self, item_id: int) -> T:
        """Return the first item with ``item_id``."""
        return self._items[self.index_of(item_id)]

    def remove_by_id(self, item_id: int) -> T:
        """Remove and return the first item with ``item_id``, keeping order."""
        return self._items.pop(self.index_of(item_id))

    def pop_front(self) -> T:
        """Remove and return the oldest item."""
        if not self._items:
            raise IndexError("pop from an empty collection")
        return self._items.pop(0)

    def describe(self, label: str) -> str:
        """Return a multi-line listing of the ids held."""
        lines = [f"Printing {label}...", f"size: {len(self._items)}"]
        lines.extend(f"{type(item).__name__} id: {item.id}" for item in self._items)
        lines.append("End Print...")
        return "\n".join(lines)


def move_shots(shots: IdList[Shot], dt: float) -> None:
    """Advance every shot along its velocity."""
    for shot in shots:
        shot.shape.position = shot.shape.position + shot.shape.velocity.scale(dt)


def move_asteroids(asteroids: IdList[Asteroid], dt: float, width: float, height: float) -> None:
    """Advance every asteroid and wrap it around the screen edges.

    The wrap margin is twice the radius of the first asteroid held.
    """
    if not len(asteroids):
        return
    margin = int(asteroids[0].shape.radius * 2)
    for asteroid in asteroids:
        shape = asteroid.shape
        moved = shape.position + shape.velocity.scale(dt)
        shape.position = wrap_position(moved, margin, width, height)