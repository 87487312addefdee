"""Graphviz rendering of question trees."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Optional, Union

from .errors import AkinatorError, TreeErrorCode
from .tree import CallCounter, Node, Tree

TEXT_DUMPS_DIR = Path("Text_dumps")
GRAPHVIZ_DUMPS_DIR = Path("Graphviz_dumps")
COUNTER_FILENAME = TEXT_DUMPS_DIR / "counter.txt"

DOT_TITLE = (
    'digraph BinaryTree {\n    node [shape="Mrecord", style="filled", fontname="Courier New"];\n'
)
EMPTY_TREE_DOT = (
    "digraph EmptyTree {\n"
    '   node [shape=box, style=rounded, fontname="Courier New", color=gray];\n'
    '   "Empty" [label="Tree is empty"];}'
)

ROOT_COLOR = "#FFFF00"
NODE_COLOR = "#00FFFF"
LEFT_ARROW_COLOR = "#008000"
RIGHT_ARROW_COLOR = "#B22222"
NULL_REF = "(nil)"

_COUNTER_RE = re.compile(r"Last\s*launch_num\s*=\s*(\d+)")

PathLike = Union[str, Path]


def render_dot(tree: Tree) -> str:
    """Return the Graphviz description of a tree, nodes in post-order."""
    root = tree.root
    if root is None:
        return EMPTY_TREE_DOT
    nodes = list(root.walk())
    names = {node: f"node{index}" for index, node in enumerate(nodes)}

    def ref(node: Optional[Node]) -> str:
        return NULL_REF if node is None else names[node]

    parts = [DOT_TITLE]
    for node in nodes:
        name = names[node]
        color = ROOT_COLOR if node is root else NODE_COLOR
        parts.append(
            f'\n    {name} [fillcolor= "{color}", label="{{<f0> value: {node.text} | '
            f'{{ <f1> left: {ref(node.left)} |<f2> right: {ref(node.right)} }}}}"]\n'
        )
        if node.left is not None:
            parts.append(
                f'    {name}:f1 -> {names[node.left]}:f0 [label="Да", '
                f'fontcolor= "{LEFT_ARROW_COLOR}", color= "{LEFT_ARROW_COLOR}", penwidth=2]\n'
            )
        if node.right is not None:
            parts.append(
                f'    {name}:f2 -> {names[node.right]}:f0 [label="Нет", '
                f'fontcolor= "{RIGHT_ARROW_COLOR}", color= "{RIGHT_ARROW_COLOR}", penwidth=2]\n'
            )
    parts.append("}")
    return "".join(parts)


def dot_filename(counter: CallCounter, text_dir: PathLike = TEXT_DUMPS_DIR) -> Path:
    """Path of the .dot file for the current launch and call numbers."""
    return Path(text_dir) / f"tree_dump_{counter.launch_num}_{counter.call_num}.dot"


def dump_tree(
    tree: Tree,
    counter: CallCounter,
    counter_path: PathLike = COUNTER_FILENAME,
    text_dir: PathLike = TEXT_DUMPS_DIR,
    image_dir: PathLike = GRAPHVIZ_DUMPS_DIR,
) -> Optional[Path]:
    """Write a .dot dump and render it to PNG with the dot tool.

    Returns the image path, or None when the tree is empty and no image is made.
    """
    counter.call_num += 1
    try:
        content = Path(counter_path).read_text()
    except OSError as exc:
        raise AkinatorError(TreeErrorCode.FILE_OPEN_ERROR, f"cannot open {counter_path}: {exc}") from exc
    match = _COUNTER_RE.match(content)
    if match is None:
        raise AkinatorError(TreeErrorCode.FILE_READING_ERROR, f"cannot read launch number from {counter_path}")
    counter.launch_num = int(match.group(1))

    dot_path = dot_filename(counter, text_dir)
    try:
        dot_path.write_text(render_dot(tree), encoding="utf-8")
    except OSError as exc:
        raise AkinatorError(TreeErrorCode.FILE_OPEN_ERROR, f"cannot write {dot_path}: {exc}") from exc

    if tree.root is None:
        return None

    image_path = Path(image_dir) / f"tree_dump_{counter.launch_num}_{counter.call_num}.png"
    try:
        subprocess.run(["dot", str(dot_path), "-T", "png", "-o", str(image_path)], check=False)
    except OSError:
        pass
    return image_path