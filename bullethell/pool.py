"""A fixed-size pool of reusable objects."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """Hands out a fixed set of pre-built objects and takes them back."""

    def __init__(self, size: int, factory: Callable[[], T]) -> None:
        self._objects: list[T] = [factory() for _ in range(size)]
        self._available: list[T] = list(self._objects)
        self._active: list[T] = []

    def acquire(self) -> Optional[T]:
        """Take an object from the pool, or None when all are in use."""
        if not self._available:
            return None
        obj = self._available.pop()
        if not any(candidate is obj for candidate in self._active):
            self._active.append(obj)
        return obj

    def release(self, obj: T) -> None:
        """Give an active object back; objects not in use are ignored."""
        for index, candidate in enumerate(self._active):
            if candidate is obj:
                del self._active[index]
                self._available.append(obj)
                return

    def __len__(self) -> int:
        return len(self._objects)

    def active(self) -> tuple[T, ...]:
        """The objects currently handed out, oldest first."""
        return tuple(self._active)

    def available(self) -> tuple[T, ...]:
        """The objects that can still be acquired."""
        return tuple(self._available)