"""Binary question tree and the launch counter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterator, Optional, Union

from .errors import AkinatorError, TreeErrorCode

_COUNTER_RE = re.compile(r"Last\s*launch_num\s*=\s*(\d+)")


class NodeType(IntEnum):
    """Kinds of nodes and of branches between them."""

    ANSWER = 1
    QUESTION = 2
    LEFT = 3
    RIGHT = 4
    ROOT = 5
    EMPTY_NODE = 6
    STACK_CANARY = 7


@dataclass(eq=False)
class Node:
    """A tree node; the left branch means "yes", the right branch "no"."""

    text: str
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """True when the node has no children (an answer)."""
        return self.left is None and self.right is None

    def is_question(self) -> bool:
        """True when the node has both children."""
        return self.left is not None and self.right is not None

    def insert_left(self, text: str) -> "Node":
        """Attach a new left child; raise if one already exists."""
        if self.left is not None:
            raise AkinatorError(TreeErrorCode.INSERTION_ERROR, "Left node already exists!")
        self.left = Node(text)
        return self.left

    def insert_right(self, text: str) -> "Node":
        """Attach a new right child; raise if one already exists."""
        if self.right is not None:
            raise AkinatorError(TreeErrorCode.INSERTION_ERROR, "Right node already exists!")
        self.right = Node(text)
        return self.right

    def walk(self) -> Iterator["Node"]:
        """Yield the subtree in post-order: left, right, then this node."""
        if self.left is not None:
            yield from self.left.walk()
        if self.right is not None:
            yield from self.right.walk()
        yield self


@dataclass
class Tree:
    """A question tree with an optional root."""

    root: Optional[Node] = None

    def insert_root(self, text: str) -> Node:
        """Create the root node; raise if the tree already has one."""
        if self.root is not None:
            raise AkinatorError(TreeErrorCode.INSERTION_ERROR, "Root is not empty!")
        self.root = Node(text)
        return self.root

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        """Detach every node and empty the tree."""
        if self.root is not None:
            for node in list(self.root.walk()):
                node.left = None
                node.right = None
        self.root = None


@dataclass
class CallCounter:
    """Numbers identifying the current launch and dump call."""

    launch_num: int = 0
    call_num: int = 0


def start_launch_counter(path: Union[str, Path]) -> CallCounter:
    """Read, increment and store the launch number kept in the counter file."""
    path = Path(path)
    counter = CallCounter()
    try:
        content = path.read_text()
    except FileNotFoundError:
        counter.launch_num = 1
    else:
        match = _COUNTER_RE.match(content)
        if match is None:
            raise AkinatorError(TreeErrorCode.DUMP_ERROR, f"cannot read launch number from {path}")
        counter.launch_num = int(match.group(1)) + 1
    try:
        path.write_text(f"Last launch_num = {counter.launch_num}")
    except OSError as exc:
        raise AkinatorError(TreeErrorCode.FILE_PRINT_ERROR, str(exc)) from exc
    return counter