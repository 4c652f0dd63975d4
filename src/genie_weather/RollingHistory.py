from collections import deque
from typing import Iterator, List, Deque


class RollingHistory:
    """
    Fixed size window of the most recent daily aggregates, oldest first.

    The length never changes: appending a new value evicts the oldest one.
    """

    def __init__(self, capacity: int, initial: int = 0) -> None:
        if capacity < 1:
            raise ValueError("Capacity must be at least 1")

        self.capacity = capacity
        self._values: Deque[int] = deque([initial] * capacity, maxlen=capacity)

    def append(self, value: int) -> None:
        self._values.append(value)

    @property
    def newest(self) -> int:
        return self._values[-1]

    @property
    def oldest(self) -> int:
        return self._values[0]

    def values(self) -> List[int]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RollingHistory):
            return self.values() == other.values()
        if isinstance(other, list):
            return self.values() == other

        return NotImplemented

    def __repr__(self) -> str:
        return f"RollingHistory({self.values()})"
