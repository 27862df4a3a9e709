"""A resource paired with the function that releases it."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ManagedResource(Generic[T]):
    """Owns a raw resource and releases it with its destructor exactly once."""

    def __init__(
        self,
        raw: Optional[T] = None,
        destructor: Optional[Callable[[Optional[T]], None]] = None,
    ) -> None:
        self.raw: Optional[T] = raw
        self.destructor: Optional[Callable[[Optional[T]], None]] = destructor

    def _clear(self) -> None:
        self.raw = None
        self.destructor = None

    def close(self) -> None:
        """Release the resource; later calls do nothing."""
        raw, destructor = self.raw, self.destructor
        self._clear()
        if destructor is not None:
            destructor(raw)

    def steal(self) -> Optional[T]:
        """Give up ownership and return the raw resource without releasing it."""
        raw = self.raw
        self._clear()
        return raw

    def transfer(self) -> ManagedResource[T]:
        """Move ownership into a new object, leaving this one empty."""
        moved = ManagedResource(self.raw, self.destructor)
        self._clear()
        return moved

    def assign(self, other: ManagedResource[T]) -> ManagedResource[T]:
        """Release the current resource and take ownership of other's."""
        if other is self:
            return self
        self.close()
        self.raw, self.destructor = other.raw, other.destructor
        other._clear()
        return self

    def __enter__(self) -> ManagedResource[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ManagedResource({self.raw!r})"