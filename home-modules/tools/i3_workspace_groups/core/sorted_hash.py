"""Order-preserving allocation of group numbers.

Group numbers live in a fixed integer space ``[0, size)``. A new name is
placed by bisecting the space: the first probe is the midpoint, and every
occupied probe narrows the search to the half on the side the name sorts
towards. Numbers, once claimed, are never moved, so workspaces already named
after a group keep their position in i3's workspace order.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .errors import AllocationError

logger = logging.getLogger(__name__)

# Largest space keeping group_number * 100 + local_number inside i3's int range
DEFAULT_SIZE = 2 ** 24


class SortedHasher:
    """Map names to integers whose numeric order follows the name order.

    Args:
        size: Number of available slots (numbers are in ``[0, size)``)
        key: Optional sort key applied to names before comparing

    Examples:
        >>> hasher = SortedHasher(size=16)
        >>> hasher.hash("m")
        8
        >>> hasher.hash("c")
        4
        >>> hasher.hash("x")
        12
        >>> hasher.hash("m")
        8
    """

    def __init__(self, size: int = DEFAULT_SIZE, key: Optional[Callable[[str], Any]] = None):
        if size < 2:
            raise ValueError(f"Allocator size must be at least 2, got {size}")
        self.size = size
        self._key = key if key is not None else (lambda name: name)
        self._names: Dict[int, str] = {}
        self._numbers: Dict[str, int] = {}

    def hash(self, name: str) -> int:
        """Return the number for ``name``, claiming a new one if needed.

        Raises:
            AllocationError: If bisection runs out of room before a free slot
        """
        if name in self._numbers:
            return self._numbers[name]

        lo, hi = 0, self.size
        probe = hi // 2
        wanted = self._key(name)
        while probe in self._names:
            occupant = self._names[probe]
            if wanted < self._key(occupant):
                hi = probe
            else:
                lo = probe
            next_probe = (lo + hi) // 2
            if next_probe == lo:
                raise AllocationError(
                    f"No free group number for '{name}' between {lo} and {hi} "
                    f"({len(self._names)} groups allocated)"
                )
            probe = next_probe

        self._claim(probe, name)
        logger.debug(f"Allocated group number {probe} for '{name}'")
        return probe

    def set(self, number: int, name: str) -> None:
        """Reserve ``number`` for ``name``.

        Used to seed the allocator with numbers already encoded in live
        workspace names.
        """
        if not (0 <= number < self.size):
            raise ValueError(f"Group number {number} outside of [0, {self.size})")
        previous = self._names.get(number)
        if previous is not None and previous != name:
            logger.warning(f"Group number {number} reassigned from '{previous}' to '{name}'")
            del self._numbers[previous]
        self._claim(number, name)

    def get(self, name: str) -> Optional[int]:
        """Return the number assigned to ``name`` without allocating."""
        return self._numbers.get(name)

    def items(self) -> Iterator[Tuple[int, str]]:
        """Iterate over ``(number, name)`` pairs in numeric order."""
        for number in sorted(self._names):
            yield number, self._names[number]

    def _claim(self, number: int, name: str) -> None:
        old_number = self._numbers.get(name)
        if old_number is not None and old_number != number:
            del self._names[old_number]
        self._names[number] = name
        self._numbers[name] = number

    def __contains__(self, name: object) -> bool:
        return name in self._numbers

    def __len__(self) -> int:
        return len(self._names)
