"""A growable stack of path steps used when describing objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

ALLOCATION_RESERVE = 10


class StackCode(IntEnum):
    """Reasons a stack can be found inconsistent or unusable."""

    STACK_NULL_POINTER = 6
    DATA_NULL_POINTER = 7
    NEGATIVE_SIZE = 8
    NEGATIVE_CAPACITY = 9
    SIZE_OVERFLOW = 10
    STACK_CANARY_BEGINING = 11
    STACK_CANARY_END = 12
    EMPTY_STACK = 13


class StackError(Exception):
    """Raised when a stack operation fails."""

    def __init__(self, code: StackCode, message: str = "") -> None:
        self.code = code
        super().__init__(message or f"ERROR_{code.name}")


@dataclass(frozen=True)
class StackItem:
    """One element: a piece of text and the type of branch it belongs to."""

    text: str
    node_type: int


class Stack:
    """A stack whose capacity grows and shrinks in steps of the reserve size."""

    def __init__(self, capacity: int) -> None:
        self._items: list[StackItem] = []
        self.capacity = capacity + ALLOCATION_RESERVE
        self.check()

    def _find_error(self) -> Optional[StackCode]:
        size = len(self._items)
        if self.capacity < 0:
            return StackCode.NEGATIVE_CAPACITY
        if size > self.capacity:
            return StackCode.SIZE_OVERFLOW
        return None

    def check(self) -> None:
        """Raise StackError if the stack is in an inconsistent state."""
        error = self._find_error()
        if error is not None:
            raise StackError(error, f"ERROR_{error.name}\n{self.dump()}")

    def _adjust_capacity(self) -> None:
        size = len(self._items)
        if size >= self.capacity:
            self.capacity += ALLOCATION_RESERVE
        elif self.capacity - size == 2 * ALLOCATION_RESERVE:
            self.capacity -= ALLOCATION_RESERVE

    def push(self, item: StackItem) -> None:
        """Put an item on top of the stack."""
        self.check()
        self._adjust_capacity()
        self._items.append(item)
        self.check()

    def pop(self) -> StackItem:
        """Remove and return the top item; raise StackError if empty."""
        self.check()
        if not self._items:
            raise StackError(StackCode.EMPTY_STACK, "Stack is empty!")
        item = self._items.pop()
        self.check()
        return item

    def dump(self) -> str:
        """Return a text table describing the stack state."""
        error = self._find_error()
        lines = []
        if error is not None:
            lines.append(f"ERROR_{error.name}")
        lines.extend(
            [
                "+---------------------------------------+",
                "|              STACK DUMP              |",
                "+-------------------+------------------+",
                f"| stack_data        | {hex(id(self._items)):<16} |",
                f"| stack_size        | {len(self._items):<16} |",
                f"| stack_capacity    | {self.capacity:<16} |",
                "+-------------------+------------------+",
            ]
        )
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[StackItem]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))