# akinator

A console guessing game. You think of an object, and the program asks yes/no
questions ("да" / "нет") as it walks down a decision tree. When its guess is
wrong, it asks what you had in mind and which property sets it apart. It then
adds that object to the tree, so it learns as you play. The game speaks
Russian.

## Installing

```
pip install .
```

## Playing

```
akinator
```

The command creates the `Text_dumps/` and `Graphviz_dumps/` folders in the
current directory if they are missing. It counts its launches in
`Text_dumps/counter.txt`, a file holding one line, `Last launch_num = N`.

The menu is answered with a number:

| Number | What it does |
|--------|--------------|
| 1 | Play a round on the loaded tree |
| 2 | Load a tree from a file (replaces the current tree) |
| 3 | Describe an object: list the properties that lead to it |
| 4 | Save the tree to a file |
| 5 | Does nothing (object comparison is not available) |
| 6 | Show a short text about the game |
| 7 | Write a Graphviz dump of the tree |
| 8 | Exit |

The menu text labels item 6 as the graphical dump and item 7 as "about".
The table above gives what each number actually does.

Notes on play:

- Load a tree (item 2) before you play. With no tree loaded, item 1 prints an
  error and returns to the menu.
- Questions accept "да" or "нет" in any letter case. The final guess accepts
  only the lower-case words.
- On a wrong guess the game asks for the new object and for a property it
  has. That property becomes a question. The new object goes on its "да"
  branch and the old guess on its "нет" branch. Each reply is cut to 49
  characters.
- File names and object names in the menu are read as a single word.
- Item 3 matches object names against the leaves, ignoring case.

The session ends with a non-zero exit status, which is the error code, when:

- a menu answer is not a number;
- input runs out;
- a tree file cannot be opened or is malformed (the current tree is then
  emptied);
- an empty tree is saved (an empty file is still written);
- the tree has a node with one child.

### Graphical dumps

Item 7 writes `Text_dumps/tree_dump_<launch>_<call>.dot` and then runs the
`dot` program. It renders the file to `Graphviz_dumps/tree_dump_<launch>_<call>.png`.
Graphviz must be installed for the images. If `dot` cannot be started, only
the `.dot` file is left. For an empty tree, a placeholder graph is written and
no image is made.

## Tree file format

```
{
    животное
    left {
        кот
    }
    right {
        стол
    }
}
```

- The first line must be exactly `{`.
- Leading spaces and tabs on the other lines are ignored, and so are blank
  lines.
- The line after an opening brace holds the node's text.
- A `left {` block is the branch taken on "да" and a `right {` block the
  branch taken on "нет". Either block may be left out, but `left` comes first.
- Inner nodes are questions and leaves are objects.

## Using it from Python

```python
from akinator.treefile import load_tree, save_tree, format_tree
from akinator.game import find_description, format_description
from akinator.dump import render_dot

tree = load_tree("tree.txt")
path = find_description(tree, "кот")
if path is not None:
    print(format_description(path), end="")
print(format_tree(tree))
print(render_dot(tree))
save_tree(tree, "tree_copy.txt")
```

The modules:

- `akinator.tree`: `Tree`, `Node` (with `insert_left`, `insert_right`,
  `is_leaf`, `is_question` and `walk`, a post-order walk), `NodeType`,
  `CallCounter` and `start_launch_counter(path)`.
- `akinator.treefile`: `parse_tree`, `load_tree`, `format_tree`, `save_tree`.
- `akinator.dump`: `render_dot`, `dot_filename`, `dump_tree`.
- `akinator.game`: `find_description` returns the list of `StackItem` steps
  from the root to an object, or `None`. `format_description` turns them into
  lines, writing "не <property>" for "нет" branches. `Akinator(tree, counter,
  input_func, output)` is the menu game, with `play()`, `describe(name)` and
  `run()`. `main()` is the `akinator` command.
- `akinator.stack`: `Stack`, `StackItem`, `StackError`, `StackCode`.
- `akinator.errors`: `AkinatorError` carries a `TreeErrorCode` in `code`.
  `error_name(code)` gives its symbolic name.

## Tests

```
pip install ".[test]"
pytest
```