from unittest import mock

import pytest

from akinator.dump import (
    DOT_TITLE,
    EMPTY_TREE_DOT,
    NODE_COLOR,
    ROOT_COLOR,
    dot_filename,
    dump_tree,
    render_dot,
)
from akinator.errors import AkinatorError, TreeErrorCode
from akinator.tree import CallCounter, Tree


def make_tree():
    tree = Tree()
    root = tree.insert_root("meows")
    root.insert_left("cat")
    barks = root.insert_right("barks")
    barks.insert_left("dog")
    barks.insert_right("fish")
    return tree


def test_render_empty_tree():
    assert render_dot(Tree()) == EMPTY_TREE_DOT


def test_render_frame_and_edges():
    dot = render_dot(make_tree())
    assert dot.startswith(DOT_TITLE)
    assert dot.endswith("}")
    assert dot.count("->") == 4
    assert dot.count('label="Да"') == 2
    assert dot.count('label="Нет"') == 2


def test_render_colors():
    dot = render_dot(make_tree())
    assert dot.count(ROOT_COLOR) == 1
    assert dot.count(NODE_COLOR) == 4


def test_render_post_order():
    dot = render_dot(make_tree())
    names = ["cat", "dog", "fish", "barks", "meows"]
    positions = [dot.index(f"value: {name} ") for name in names]
    assert positions == sorted(positions)


def test_render_leaf_has_null_children():
    tree = Tree()
    tree.insert_root("alone")
    dot = render_dot(tree)
    assert "left: (nil) |<f2> right: (nil)" in dot
    assert "->" not in dot


def test_dot_filename(tmp_path):
    counter = CallCounter(launch_num=3, call_num=2)
    assert dot_filename(counter, tmp_path) == tmp_path / "tree_dump_3_2.dot"


def write_counter(tmp_path, text):
    path = tmp_path / "counter.txt"
    path.write_text(text)
    return path


def test_dump_tree_runs_dot(tmp_path):
    counter_path = write_counter(tmp_path, "Last launch_num = 5")
    counter = CallCounter()
    tree = make_tree()
    with mock.patch("akinator.dump.subprocess.run") as run:
        image = dump_tree(tree, counter, counter_path, tmp_path, tmp_path)
    assert counter.call_num == 1
    assert counter.launch_num == 5
    dot_path = tmp_path / "tree_dump_5_1.dot"
    assert dot_path.read_text(encoding="utf-8") == render_dot(tree)
    assert image == tmp_path / "tree_dump_5_1.png"
    run.assert_called_once_with(
        ["dot", str(dot_path), "-T", "png", "-o", str(image)], check=False
    )


def test_dump_tree_counts_calls(tmp_path):
    counter_path = write_counter(tmp_path, "Last launch_num = 2")
    counter = CallCounter()
    with mock.patch("akinator.dump.subprocess.run"):
        dump_tree(make_tree(), counter, counter_path, tmp_path, tmp_path)
        second = dump_tree(make_tree(), counter, counter_path, tmp_path, tmp_path)
    assert counter.call_num == 2
    assert second == tmp_path / "tree_dump_2_2.png"


def test_dump_empty_tree_skips_render(tmp_path):
    counter_path = write_counter(tmp_path, "Last launch_num = 1")
    counter = CallCounter()
    with mock.patch("akinator.dump.subprocess.run") as run:
        result = dump_tree(Tree(), counter, counter_path, tmp_path, tmp_path)
    assert result is None
    run.assert_not_called()
    assert (tmp_path / "tree_dump_1_1.dot").read_text(encoding="utf-8") == EMPTY_TREE_DOT


def test_dump_missing_dot_tool(tmp_path):
    counter_path = write_counter(tmp_path, "Last launch_num = 1")
    with mock.patch("akinator.dump.subprocess.run", side_effect=FileNotFoundError):
        result = dump_tree(make_tree(), CallCounter(), counter_path, tmp_path, tmp_path)
    assert result == tmp_path / "tree_dump_1_1.png"


def test_dump_missing_counter(tmp_path):
    with pytest.raises(AkinatorError) as info:
        dump_tree(make_tree(), CallCounter(), tmp_path / "none.txt", tmp_path, tmp_path)
    assert info.value.code == TreeErrorCode.FILE_OPEN_ERROR


def test_dump_bad_counter(tmp_path):
    counter_path = write_counter(tmp_path, "garbage")
    with pytest.raises(AkinatorError) as info:
        dump_tree(make_tree(), CallCounter(), counter_path, tmp_path, tmp_path)
    assert info.value.code == TreeErrorCode.FILE_READING_ERROR