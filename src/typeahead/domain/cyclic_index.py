"""Wrap-around cursor over the visible suggestions."""

__all__ = ["CyclicIndex"]


class CyclicIndex:
    """
    Bounded counter with wraparound.

    Advancing past the last index wraps to 0 and retreating past 0 wraps to
    ``size - 1``. With nothing to navigate (``size == 0``) the index is left
    untouched.
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._index = start

    @property
    def index(self) -> int:
        return self._index

    def advance(self, direction: int, size: int) -> int:
        """
        Move one step in ``direction`` over ``size`` slots.

        Args:
            direction: +1 (next) or -1 (previous)
            size: Number of slots available

        Returns:
            The new index (unchanged when ``size`` is 0)

        Raises:
            ValueError: If direction is not +1/-1 or size is negative
        """
        if direction not in (1, -1):
            raise ValueError(f"direction must be +1 or -1, got {direction}")
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if size == 0:
            return self._index

        # Python's % is already non-negative for a positive modulus
        self._index = (self._index + direction) % size
        return self._index

    def reset(self, index: int = 0) -> None:
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")
        self._index = index

    def __repr__(self) -> str:
        return f"CyclicIndex(index={self._index})"
