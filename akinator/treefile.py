"""Reading and writing question trees in the brace-delimited text format."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Union

from .errors import AkinatorError, TreeErrorCode
from .tree import Node, Tree

INDENT = "    "
OPEN_LINE = "{"
CLOSE_LINE = "}"
LEFT_LINE = "left {"
RIGHT_LINE = "right {"
EMPTY_TREE_WARNING = "Варнинг! Было записано пустое дерево"


def _incorrect(message: str) -> AkinatorError:
    return AkinatorError(TreeErrorCode.INPUT_FILE_INCORRECT, message)


def _significant_lines(raw_lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with leading blanks removed, skipping blank lines."""
    for raw in raw_lines:
        line = raw.lstrip(" \t")
        if line:
            yield line


def _next_line(lines: Iterator[str]) -> str:
    line = next(lines, None)
    if line is None:
        raise _incorrect("unexpected end of input")
    return line


def _parse_children(node: Node, lines: Iterator[str]) -> None:
    line = _next_line(lines)
    if line == LEFT_LINE:
        _parse_children(node.insert_left(_next_line(lines)), lines)
        line = _next_line(lines)
    if line == RIGHT_LINE:
        _parse_children(node.insert_right(_next_line(lines)), lines)
        line = _next_line(lines)
    if line != CLOSE_LINE:
        raise _incorrect(f"unexpected line {line!r}")


def parse_tree(text: str) -> Tree:
    """Build a tree from its text form; raise AkinatorError if malformed."""
    first, _, rest = text.partition("\n")
    if first != OPEN_LINE:
        raise _incorrect("Input file is incorrect")
    lines = _significant_lines(rest.split("\n"))
    tree = Tree()
    root = tree.insert_root(_next_line(lines))
    _parse_children(root, lines)
    return tree


def load_tree(path: Union[str, Path]) -> Tree:
    """Read and parse a tree file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise AkinatorError(TreeErrorCode.FILE_OPEN_ERROR, f"cannot open {path}: {exc}") from exc
    return parse_tree(text)


def _format_branch(node: Node, header: str, height: int) -> Iterator[str]:
    yield f"{INDENT * height}{header}\n"
    yield f"{INDENT * (height + 1)}{node.text}\n"
    if node.left is not None:
        yield from _format_branch(node.left, LEFT_LINE, height + 1)
    if node.right is not None:
        yield from _format_branch(node.right, RIGHT_LINE, height + 1)
    yield f"{INDENT * height}{CLOSE_LINE}\n"


def format_tree(tree: Tree) -> str:
    """Return the text form of a tree; an empty tree gives an empty string."""
    root = tree.root
    if root is None:
        return ""
    parts = [f"{OPEN_LINE}\n{INDENT}{root.text}\n"]
    if root.left is not None:
        parts.extend(_format_branch(root.left, LEFT_LINE, 1))
    if root.right is not None:
        parts.extend(_format_branch(root.right, RIGHT_LINE, 1))
    parts.append(CLOSE_LINE)
    return "".join(parts)


def save_tree(tree: Tree, path: Union[str, Path]) -> None:
    """Write a tree to a file; an empty tree leaves an empty file and raises."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(format_tree(tree))
    except OSError as exc:
        raise AkinatorError(TreeErrorCode.FILE_OPEN_ERROR, f"Can not open file {path}: {exc}") from exc
    if tree.is_empty():
        raise AkinatorError(TreeErrorCode.TREE_IS_EMPTY, EMPTY_TREE_WARNING)